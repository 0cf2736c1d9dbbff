"""
PDF Text Extractor

Thin adapter over PyMuPDF. Opens a PDF from raw bytes and yields, page by
page, the positioned text runs the rest of the pipeline works with.
No layout analysis happens here; fragments come out in the library's
native reading order.
"""

import os

import fitz  # pymupdf

from ..errors import PDFParseError
from ..fragments import TextFragment


class PDFDocument:
    """An open PDF. Pages are numbered from 1."""

    def __init__(self, doc: "fitz.Document"):
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def page_fragments(self, number: int) -> list[TextFragment]:
        """
        Return the text spans of page `number` as fragments.

        The baseline is the span origin converted from PyMuPDF's top-down
        coordinates back to PDF user space, so larger values sit higher on
        the page.
        """
        if not 1 <= number <= self.page_count:
            raise IndexError(f"Page {number} out of range (1-{self.page_count})")

        try:
            page = self._doc.load_page(number - 1)
            height = page.rect.height
            content = page.get_text("dict")
        except Exception as e:
            raise PDFParseError(f"Failed to read page {number}: {e}") from e

        fragments = []
        for block in content.get("blocks", []):
            if block.get("type") != 0:  # images
                continue
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    _, origin_y = span["origin"]
                    fragments.append(
                        TextFragment(text=span["text"], baseline_y=height - origin_y)
                    )
        return fragments

    def close(self) -> None:
        self._doc.close()


class PDFConverter:
    """Opens PDFs for text extraction."""

    CONTENT_TYPE = "application/pdf"
    SUPPORTED_EXTENSIONS = {".pdf"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in PDFConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def accepts(content_type: str) -> bool:
        """Check a declared content type, ignoring parameters like charset."""
        media_type = (content_type or "").split(";", 1)[0].strip().lower()
        return media_type == PDFConverter.CONTENT_TYPE

    @staticmethod
    def open(data: bytes) -> PDFDocument:
        """
        Open a PDF held in memory.

        Raises:
            PDFParseError: empty input, a corrupt file, an encrypted
                document that needs a password, or a document without pages.
        """
        if not data:
            raise PDFParseError("PDF file is empty")

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise PDFParseError(str(e) or type(e).__name__) from e

        if doc.needs_pass:
            doc.close()
            raise PDFParseError("PDF is password protected")

        if doc.page_count == 0:
            doc.close()
            raise PDFParseError("PDF has no pages")

        return PDFDocument(doc)
