"""
Data structures passed between the extractor and the assembler.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextFragment:
    """One positioned run of characters on a page."""
    text: str
    baseline_y: float  # PDF user space, grows upward


@dataclass(frozen=True)
class SourceFile:
    """
    A document selected for conversion.

    The content type is the *declared* type (from the file extension or the
    HTTP response header); the bytes are not sniffed.
    """
    name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)
