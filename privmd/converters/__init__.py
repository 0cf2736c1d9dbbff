from .pdf_converter import PDFConverter, PDFDocument
from .web_converter import WebConverter

__all__ = ["PDFConverter", "PDFDocument", "WebConverter"]
