"""
Exceptions raised while loading and converting a source document.
"""


class ConversionError(Exception):
    """Base class for every failure a conversion can report to the user."""
    pass


class InvalidFileTypeError(ConversionError):
    """Raised when the declared content type of a source is not a PDF."""

    def __init__(self, name: str, content_type: str):
        self.name = name
        self.content_type = content_type
        super().__init__(
            f"Invalid file type for {name or 'source'}: "
            f"{content_type or 'unknown'} (expected application/pdf)"
        )


class PDFParseError(ConversionError):
    """Raised when the PDF library cannot read the document."""
    pass


class FetchError(ConversionError):
    """Raised when a remote source cannot be downloaded."""
    pass
