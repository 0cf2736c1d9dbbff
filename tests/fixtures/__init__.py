# Test fixtures
from .sample_documents import (
    MESSY_EXTRACTED_TEXT,
    FakeDocument,
    FakeExtractor,
    build_pdf,
    fragments,
)

__all__ = [
    "MESSY_EXTRACTED_TEXT",
    "FakeDocument",
    "FakeExtractor",
    "build_pdf",
    "fragments",
]
