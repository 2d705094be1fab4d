"""
Exceptions raised by office2markdown.

Every failure surfaces as one of these, each tagged with the ``kind`` used
by callers to tell them apart.
"""


class OfficeParserError(Exception):
    """Base exception for all office2markdown errors."""

    kind = 'unknown'

    def __init__(self, message=''):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self):
        return 'An unknown error occurred while parsing the document.'


class ExtensionUnsupportedError(OfficeParserError):
    """Raised when no converter exists for the detected extension."""

    kind = 'extensionUnsupported'

    def __init__(self, extension, message=''):
        self.extension = extension
        super().__init__(message)

    @property
    def default_message(self):
        return ('Only docx, pptx, xlsx, odt, odp, ods and pdf files are '
                'supported, got {}.'.format(self.extension))


class FileCorruptedError(OfficeParserError):
    """Raised when a mandatory entry is missing or the content is inconsistent."""

    kind = 'fileCorrupted'

    def __init__(self, filepath, message=''):
        self.filepath = filepath
        super().__init__(message)

    @property
    def default_message(self):
        return 'Your file {} seems to be corrupted.'.format(self.filepath)


class FileDoesNotExistError(OfficeParserError):
    """Raised when a path input does not point to a readable file."""

    kind = 'fileDoesNotExist'

    def __init__(self, filepath, message=''):
        self.filepath = filepath
        super().__init__(message)

    @property
    def default_message(self):
        return ('File {} could not be found! Check that the file exists and '
                'that the path is correct.'.format(self.filepath))


class ImproperBuffersError(OfficeParserError):
    """Raised when the type of an in-memory buffer cannot be determined."""

    kind = 'improperBuffers'

    @property
    def default_message(self):
        return 'Error occurred while reading the file buffers.'


class InvalidInputError(OfficeParserError):
    """Raised when the input is neither a byte buffer nor a path."""

    kind = 'invalidInput'

    @property
    def default_message(self):
        return 'Invalid input type: expected a byte buffer or a valid file path.'


class ImproperArgumentsError(OfficeParserError):
    """Raised by the command line when no file argument is given."""

    kind = 'improperArguments'

    @property
    def default_message(self):
        return 'Improper arguments.'
