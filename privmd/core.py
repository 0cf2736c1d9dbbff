"""
PrivMD Core Engine

Orchestrates a single conversion: validate the declared type, extract the
pages one after another, assemble paragraphs, normalize to Markdown and
append the attribution trailer. Each run returns an immutable
ConversionResult; nothing is carried over between runs.
"""

import mimetypes
import os
import re
import sys
import time
from dataclasses import dataclass
from typing import Optional

from .assembler import assemble_document
from .converters.pdf_converter import PDFConverter
from .converters.web_converter import WebConverter
from .errors import ConversionError, InvalidFileTypeError
from .fragments import SourceFile
from .normalizer import normalize

DEFAULT_OUTPUT_NAME = "output.md"
DEFAULT_OUTPUT_DIR = "privmd_output"

_PDF_SUFFIX = re.compile(r"\.pdf$", re.IGNORECASE)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion. A failed run carries no markdown."""
    file_name: str
    markdown: str = ""
    error: Optional[str] = None
    page_count: int = 0
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def output_name(self) -> str:
        return markdown_filename(self.file_name)


def markdown_filename(file_name: Optional[str]) -> str:
    """
    Name of the .md file for a source: a trailing .pdf becomes .md,
    anything else gets .md appended, and no name at all gives output.md.
    """
    base = os.path.basename(file_name or "")
    if not base:
        return DEFAULT_OUTPUT_NAME
    if _PDF_SUFFIX.search(base):
        return _PDF_SUFFIX.sub(".md", base)
    return f"{base}.md"


def render_trailer(page_count: int, elapsed_seconds: float) -> str:
    pages = "page" if page_count == 1 else "pages"
    return (
        f"\n\n---\n\n"
        f"_Converted locally by PrivMD: {page_count} {pages} "
        f"in {elapsed_seconds:.2f}s_\n"
    )


def load_source(path: str) -> SourceFile:
    """Read a local file, declaring its type from the extension."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    content_type, _ = mimetypes.guess_type(path)
    with open(path, "rb") as f:
        data = f.read()
    return SourceFile(
        name=os.path.basename(path),
        content_type=content_type or "application/octet-stream",
        data=data,
    )


class Converter:
    """
    Main conversion engine.

    The extractor is anything with an `open(data)` method returning a
    document that exposes `page_count`, `page_fragments(number)` and
    `close()`; PDFConverter by default.
    """

    def __init__(
        self,
        output_dir: str = None,
        verbose: bool = True,
        include_trailer: bool = True,
        extractor=PDFConverter,
    ):
        self.output_dir = output_dir or os.path.join(os.getcwd(), DEFAULT_OUTPUT_DIR)
        self.verbose = verbose
        self.include_trailer = include_trailer
        self.extractor = extractor
        self._written = set()

    def convert(self, source: SourceFile) -> ConversionResult:
        """
        Convert a source to Markdown.

        Raises:
            InvalidFileTypeError: declared type is not application/pdf.
                Raised before the extractor is touched.
            PDFParseError: the PDF library rejected the document.
        """
        if not PDFConverter.accepts(source.content_type):
            raise InvalidFileTypeError(source.name, source.content_type)

        self._log(f"[PDF] Converting: {source.name} ({source.size} bytes)")
        started = time.perf_counter()

        document = self.extractor.open(source.data)
        try:
            page_count = document.page_count
            buffer = assemble_document(self._iter_pages(document, page_count))
        finally:
            document.close()

        markdown = normalize(buffer)
        elapsed = time.perf_counter() - started
        if self.include_trailer:
            markdown += render_trailer(page_count, elapsed)

        return ConversionResult(
            file_name=source.name,
            markdown=markdown,
            page_count=page_count,
            elapsed_seconds=elapsed,
        )

    def _iter_pages(self, document, page_count: int):
        for number in range(1, page_count + 1):
            self._log(f"[PAGE] {number}/{page_count}")
            yield document.page_fragments(number)

    def run(self, source: SourceFile, save: bool = False) -> ConversionResult:
        """
        Convert without raising conversion errors.

        A failure is reported on stderr and returned as a result with an
        empty markdown body and the error message set.
        """
        try:
            result = self.convert(source)
        except ConversionError as e:
            print(f"[ERROR] {source.name or 'source'}: {e}", file=sys.stderr)
            return ConversionResult(file_name=source.name, error=str(e))

        if save:
            self.save(result)
        return result

    def convert_path(self, path: str, save: bool = True) -> ConversionResult:
        """Convert a local file or an http(s) URL."""
        path = path.strip()
        if WebConverter.can_handle(path):
            self._log(f"[URL] Fetching: {path}")
            try:
                source = WebConverter.fetch(path)
            except ConversionError as e:
                print(f"[ERROR] {path}: {e}", file=sys.stderr)
                return ConversionResult(file_name="", error=str(e))
        else:
            source = load_source(path)
        return self.run(source, save=save)

    def convert_directory(self, dir_path: str, save: bool = True) -> list[ConversionResult]:
        """Convert every .pdf file in a directory, one after another."""
        results = []
        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path) or not PDFConverter.can_handle(file_path):
                continue
            try:
                results.append(self.run(load_source(file_path), save=save))
            except OSError as e:
                print(f"[ERROR] {filename}: {e}", file=sys.stderr)
                results.append(ConversionResult(file_name=filename, error=str(e)))
        return results

    def save(self, result: ConversionResult) -> str:
        """Write a successful result to the output directory."""
        if not result.ok:
            raise ValueError(f"Nothing to save for {result.file_name}: {result.error}")
        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, result.output_name)
        key = os.path.normcase(os.path.abspath(out_path))
        if key in self._written:
            print(f"[WARN] Overwriting {out_path} written earlier in this run", file=sys.stderr)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(result.markdown)
        self._written.add(key)
        self._log(f"[SAVED] {out_path}")
        return out_path

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)
