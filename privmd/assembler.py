"""
Page Assembler

Joins the text fragments of a page into a single blob, inserting a
paragraph break wherever the baseline jumps by more than a fixed gap,
then stitches the pages together under "## Page N" markers.
"""

from typing import Iterable, Sequence

from .fragments import TextFragment

# Vertical gap (PDF units) between consecutive baselines that starts a new
# paragraph. Independent of font size and scale.
PARAGRAPH_BREAK_THRESHOLD = 20

PAGE_HEADING = "## Page {number}"


def assemble_page(fragments: Iterable[TextFragment]) -> str:
    """
    Concatenate a page's fragments in the order the extractor yields them.

    A blank line is emitted before a fragment whose baseline is more than
    PARAGRAPH_BREAK_THRESHOLD away from the previous one. A previous
    baseline of zero counts as unset, so the first fragment never breaks.
    """
    parts = []
    last_y = 0

    for fragment in fragments:
        current_y = fragment.baseline_y
        if last_y > 0 and abs(last_y - current_y) > PARAGRAPH_BREAK_THRESHOLD:
            parts.append("\n\n")
        parts.append(fragment.text + " ")
        last_y = current_y

    return "".join(parts).strip()


def page_section(number: int, text: str) -> str:
    """Wrap one page's text under its page heading."""
    heading = PAGE_HEADING.format(number=number)
    return f"\n\n{heading}\n\n{text}"


def assemble_document(pages: Iterable[Sequence[TextFragment]]) -> str:
    """Build the document buffer from per-page fragments, numbered from 1."""
    sections = []
    for number, fragments in enumerate(pages, start=1):
        sections.append(page_section(number, assemble_page(fragments)))
    return "".join(sections)
