"""
Command-line interface for office2markdown.
"""

import argparse
import codecs
import logging
import sys

from .config import str_to_bool
from .core import ERROR_HEADER, parse_office
from .exceptions import ImproperArgumentsError, OfficeParserError

USAGE_NOTE = """\
Config options take the form --key=value and may appear before or after
the file path. Unknown options are ignored.

Example:
    office2markdown --ignoreNotes=true --putNotesAtLast=true ./example.pptx
"""


def decode_delimiter(value):
    """Turns escapes typed on the command line (``\\n``, ``\\t``) into the characters."""
    return codecs.decode(value, 'unicode_escape')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='office2markdown',
        description='Extract the text of docx, pptx, xlsx, odt, odp, ods and '
                    'pdf files as markdown.',
        epilog=USAGE_NOTE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('file', nargs='?', help='path of the document')
    parser.add_argument(
        '--ignoreNotes', dest='ignore_notes', type=str_to_bool, metavar='[true|false]',
        help='ignore notes in files like presentations (default: false)'
    )
    parser.add_argument(
        '--newlineDelimiter', dest='newline_delimiter', type=decode_delimiter,
        metavar='DELIMITER', help="delimiter used for new lines (default: '\\n')"
    )
    parser.add_argument(
        '--putNotesAtLast', dest='put_notes_at_last', type=str_to_bool,
        metavar='[true|false]',
        help='collect notes at the end of the output (default: false)'
    )
    parser.add_argument(
        '--outputErrorToConsole', dest='output_error_to_console', type=str_to_bool,
        metavar='[true|false]', help='log errors to the console (default: false)'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='enable debug logging'
    )
    return parser


def process_args(parser, argv=None):
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments; unknown ``--key=value`` options
        are dropped
    """
    args, _ = parser.parse_known_args(argv)
    return args


def main(argv=None):
    """
    Main entry point for CLI.

    Returns:
        int: Exit status
    """
    parser = build_parser()
    args = process_args(parser, argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.file is None:
        print(ERROR_HEADER + ImproperArgumentsError().message, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    config = {
        'ignore_notes': args.ignore_notes,
        'newline_delimiter': args.newline_delimiter,
        'put_notes_at_last': args.put_notes_at_last,
        'output_error_to_console': args.output_error_to_console,
    }
    try:
        text = parse_office(args.file, config=config)
    except OfficeParserError as error:
        print(ERROR_HEADER + error.message, file=sys.stderr)
        return 1

    output = getattr(sys.stdout, 'buffer', sys.stdout)
    output.write((text + '\n').encode('utf-8'))
    output.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
