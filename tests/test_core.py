"""
Tests for input detection, dispatch and error reporting.
"""

import asyncio
import logging
import time

import pytest

from conftest import make_zip, w_paragraph, w_run
from office2markdown import (
    Config, ExtensionUnsupportedError, FileCorruptedError, FileDoesNotExistError,
    ImproperBuffersError, InvalidInputError, parse_office, parse_office_async,
    process_to_markdown,
)
from office2markdown import core
from office2markdown.core import ERROR_HEADER, SUPPORTED_EXTENSIONS, convert, prepare_input
from office2markdown.utils.file_utils import sniff_extension


@pytest.fixture
def docx_bytes(build_docx):
    return build_docx(w_paragraph(w_run('Intro'), style='Heading1'))


class TestPrepareInput:

    def test_path_extension_is_lower_cased(self, tmp_path, docx_bytes):
        path = tmp_path / 'Report.DOCX'
        path.write_bytes(docx_bytes)
        assert prepare_input(path) == (str(path), 'docx')

    def test_buffer_is_sniffed(self, docx_bytes):
        assert prepare_input(docx_bytes) == (docx_bytes, 'docx')
        assert prepare_input(bytearray(docx_bytes)) == (docx_bytes, 'docx')
        assert prepare_input(memoryview(docx_bytes)) == (docx_bytes, 'docx')

    def test_missing_path(self, tmp_path):
        with pytest.raises(FileDoesNotExistError) as excinfo:
            prepare_input(str(tmp_path / 'nope.docx'))
        assert excinfo.value.kind == 'fileDoesNotExist'

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileDoesNotExistError):
            prepare_input(str(tmp_path))

    def test_unrecognised_buffer(self):
        with pytest.raises(ImproperBuffersError):
            prepare_input(b'just some text')

    @pytest.mark.parametrize('value', [None, 42, ['a.docx']])
    def test_invalid_input(self, value):
        with pytest.raises(InvalidInputError):
            prepare_input(value)


class TestSniffExtension:

    def test_magic_numbers(self):
        assert sniff_extension(b'%PDF-1.7\n') == 'pdf'
        assert sniff_extension(b'\x89PNG\r\n\x1a\n....') == 'png'
        assert sniff_extension(b'') is None

    def test_containers(self, build_pptx, build_xlsx, build_odf):
        assert sniff_extension(build_pptx({1: ['x']})) == 'pptx'
        assert sniff_extension(build_xlsx([[]])) == 'xlsx'
        assert sniff_extension(build_odf('')) == 'odt'
        assert sniff_extension(build_odf(
            '', mimetype='application/vnd.oasis.opendocument.spreadsheet')) == 'ods'
        assert sniff_extension(make_zip({'readme.txt': 'hi'})) == 'zip'


class TestParseOffice:

    def test_buffer(self, docx_bytes):
        assert parse_office(docx_bytes) == '# Intro'

    def test_path(self, tmp_path, docx_bytes):
        path = tmp_path / 'doc.docx'
        path.write_bytes(docx_bytes)
        assert parse_office(str(path)) == '# Intro'

    def test_async(self, docx_bytes):
        assert asyncio.run(parse_office_async(docx_bytes)) == '# Intro'

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / 'notes.txt'
        path.write_text('hello')
        with pytest.raises(ExtensionUnsupportedError) as excinfo:
            parse_office(str(path))
        assert excinfo.value.extension == 'txt'
        assert 'txt' in excinfo.value.message

    def test_sniffed_but_unsupported(self):
        with pytest.raises(ExtensionUnsupportedError) as excinfo:
            parse_office(b'\x89PNG\r\n\x1a\n0000')
        assert excinfo.value.extension == 'png'

    def test_wrong_extension_for_content(self, tmp_path):
        path = tmp_path / 'fake.docx'
        path.write_bytes(b'not a zip')
        with pytest.raises(FileCorruptedError):
            parse_office(path)

    def test_callback_success(self, docx_bytes):
        calls = []
        assert parse_office(docx_bytes, lambda *args: calls.append(args)) is None
        assert calls == [('# Intro', None)]

    def test_callback_error(self):
        calls = []
        parse_office(b'junk', lambda *args: calls.append(args))
        assert len(calls) == 1
        result, error = calls[0]
        assert result is None
        assert isinstance(error, ImproperBuffersError)

    def test_options_by_name(self, build_pptx):
        deck = build_pptx({1: ['Slide']}, notes={1: ['Secret']})
        assert 'Secret' not in process_to_markdown(deck, ignoreNotes=True)
        assert 'Secret' not in process_to_markdown(deck, ignore_notes=True)
        assert 'Secret' in process_to_markdown(deck)


class TestErrorLogging:

    def test_logged_when_enabled(self, caplog):
        with caplog.at_level(logging.ERROR, logger='office2markdown'):
            with pytest.raises(ImproperBuffersError):
                parse_office(b'junk', config={'outputErrorToConsole': True})
        assert any(record.getMessage().startswith(ERROR_HEADER) for record in caplog.records)

    def test_silent_by_default(self, caplog):
        with caplog.at_level(logging.ERROR, logger='office2markdown'):
            with pytest.raises(ImproperBuffersError):
                parse_office(b'junk')
        assert not caplog.records


class TestConfig:

    def test_defaults(self):
        assert Config.from_options(None) == Config()
        assert Config().newline_delimiter == '\n'

    def test_aliases_and_unknown_keys(self):
        config = Config.from_options({'putNotesAtLast': True, 'colour': 'red',
                                      'newline_delimiter': None})
        assert config.put_notes_at_last
        assert config.newline_delimiter == '\n'

    def test_string_switches(self):
        config = Config.from_options({'ignoreNotes': 'false', 'putNotesAtLast': ' TRUE ',
                                      'outputErrorToConsole': 1})
        assert config.ignore_notes is False
        assert config.put_notes_at_last is True
        assert config.output_error_to_console is True

    def test_string_switch_keeps_notes(self, build_pptx):
        deck = build_pptx({1: ['Slide']}, notes={1: ['Secret']})
        assert 'Secret' in process_to_markdown(deck, ignoreNotes='false')

    def test_config_passes_through(self):
        config = Config(ignore_notes=True)
        assert Config.from_options(config) is config


def test_supported_extensions():
    assert SUPPORTED_EXTENSIONS == {'docx', 'pptx', 'xlsx', 'odt', 'odp', 'ods', 'pdf'}


def test_container_conversion_leaves_event_loop_free(monkeypatch):
    def slow_converter(source, config):
        time.sleep(0.2)
        return 'done'

    monkeypatch.setitem(core.CONVERTERS, 'docx', slow_converter)

    async def run():
        ticks = []

        async def ticker():
            while True:
                ticks.append(1)
                await asyncio.sleep(0.005)

        task = asyncio.create_task(ticker())
        await asyncio.sleep(0)
        try:
            result = await convert(b'', 'docx', Config())
        finally:
            task.cancel()
        return result, len(ticks)

    result, ticks = asyncio.run(run())
    assert result == 'done'
    assert ticks >= 10
