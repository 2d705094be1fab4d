"""
Configuration for a single extraction call.
"""

from dataclasses import dataclass, fields

# Option names as they appear on the command line and in option mappings.
OPTION_ALIASES = {
    'outputErrorToConsole': 'output_error_to_console',
    'newlineDelimiter': 'newline_delimiter',
    'ignoreNotes': 'ignore_notes',
    'putNotesAtLast': 'put_notes_at_last',
}


def str_to_bool(value):
    """Reads ``true`` (any case, surrounding spaces allowed) as True, anything else as False."""
    return value.strip().lower() == 'true'


def _coerce(default, value):
    if isinstance(default, bool):
        return str_to_bool(value) if isinstance(value, str) else bool(value)
    return value


@dataclass(frozen=True)
class Config:
    """
    Options recognised by every converter.

    Attributes:
        output_error_to_console: Log failures through the package logger
            before they reach the caller
        newline_delimiter: Separator used when joining Markdown blocks
        ignore_notes: Drop speaker notes entirely
        put_notes_at_last: Collect notes into a trailing section instead of
            placing them after their slide. Ignored when ``ignore_notes`` is set.
    """

    output_error_to_console: bool = False
    newline_delimiter: str = '\n'
    ignore_notes: bool = False
    put_notes_at_last: bool = False

    @classmethod
    def from_options(cls, options=None):
        """
        Builds a Config, filling unset options with their defaults.

        Args:
            options: None, a Config, or a mapping using either the camelCase
                option names (``ignoreNotes``) or the attribute names
                (``ignore_notes``). Unknown keys are ignored. Switches given as
                strings are true only for ``"true"``.

        Returns:
            Config
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        defaults = {field.name: field.default for field in fields(cls)}
        values = {}
        for key, value in dict(options).items():
            name = OPTION_ALIASES.get(key, key)
            if name in defaults and value is not None:
                values[name] = _coerce(defaults[name], value)
        return cls(**values)
