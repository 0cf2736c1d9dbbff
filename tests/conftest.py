"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from privmd.core import Converter
from privmd.fragments import SourceFile
from tests.fixtures.sample_documents import FakeExtractor, build_pdf


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def output_dir(tmp_path):
    """Directory converted Markdown is written to."""
    return tmp_path / "out"


@pytest.fixture
def converter(output_dir):
    """A quiet converter backed by the real PDF library."""
    return Converter(output_dir=str(output_dir), verbose=False)


@pytest.fixture
def fake_extractor():
    """Extractor that serves the two-page Hello/Goodbye document."""
    return FakeExtractor(
        [
            [("Hello", 100), ("World", 100)],
            [("Goodbye", 50)],
        ]
    )


@pytest.fixture
def fake_converter(output_dir, fake_extractor):
    """A quiet converter wired to the fake extractor, without trailer."""
    return Converter(
        output_dir=str(output_dir),
        verbose=False,
        include_trailer=False,
        extractor=fake_extractor,
    )


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def two_page_pdf():
    """Real PDF bytes: "Hello World" on page 1, "Goodbye" on page 2."""
    return build_pdf(
        [
            [("Hello", 72, 100), ("World", 200, 100)],
            [("Goodbye", 72, 400)],
        ]
    )


@pytest.fixture
def pdf_source(two_page_pdf):
    """The two-page PDF as a selected file."""
    return SourceFile(name="report.pdf", content_type="application/pdf", data=two_page_pdf)


@pytest.fixture
def text_source():
    """A plain-text file that must be rejected."""
    return SourceFile(name="notes.txt", content_type="text/plain", data=b"just some notes")


@pytest.fixture
def pdf_file(tmp_path, two_page_pdf):
    """The two-page PDF written to disk."""
    path = tmp_path / "report.pdf"
    path.write_bytes(two_page_pdf)
    return path
