"""
Markdown Normalizer

Rewrites extracted page text into Markdown through a fixed, ordered list
of pure string passes. Later passes rely on the shape produced by earlier
ones (heading spacing assumes blank-line runs are already capped), so the
order of PASSES is part of the contract.

normalize() never raises: any string, clean or malformed, comes back as a
best-effort Markdown rendition, and running it twice changes nothing.
"""

import re
from typing import Callable, Optional

# Shortest all-caps line promoted to a heading.
HEADING_MIN_LENGTH = 11

BULLET_GLYPHS = "•●○◦▪▫-"

_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")
_BLANK_LINE_RUN = re.compile(r"\n{3,}")
_BULLET = re.compile(r"^[" + re.escape(BULLET_GLYPHS) + r"][^\S\n]+", re.MULTILINE)
_NUMBERED = re.compile(r"^(\d+)\.[^\S\n]+", re.MULTILINE)
_CAPS_LINE = re.compile(
    r"^(?=[A-Z ]*[A-Z])[A-Z ]{%d,}$" % HEADING_MIN_LENGTH, re.MULTILINE
)
_HEADING_WITHOUT_GAP_BEFORE = re.compile(r"(?<=[^\n])\n(?=#{1,6} )")
_HEADING_WITHOUT_GAP_AFTER = re.compile(r"^(#{1,6} .*)\n(?=[^\n])", re.MULTILINE)


def collapse_spaces(text: str) -> str:
    """Collapse horizontal whitespace to one space and drop it at line edges."""
    text = _HORIZONTAL_SPACE.sub(" ", text)
    return "\n".join(line.strip(" ") for line in text.split("\n"))


def collapse_blank_lines(text: str) -> str:
    return _BLANK_LINE_RUN.sub("\n\n", text)


def canonicalize_bullets(text: str) -> str:
    """Turn a leading bullet glyph into a Markdown "- " bullet."""
    return _BULLET.sub("- ", text)


def canonicalize_numbering(text: str) -> str:
    """Normalize "1.<spaces>" to "1. ". Numbers are kept as they are."""
    return _NUMBERED.sub(r"\1. ", text)


def promote_caps_headings(text: str) -> str:
    """
    Promote long all-caps lines to level-3 headings.

    Purely lexical: a shouted sentence in prose becomes a heading and a
    Title Case heading is missed.
    """
    return _CAPS_LINE.sub(lambda m: "### " + m.group(0).strip(), text)


def space_before_headings(text: str) -> str:
    return _HEADING_WITHOUT_GAP_BEFORE.sub("\n\n", text)


def space_after_headings(text: str) -> str:
    return _HEADING_WITHOUT_GAP_AFTER.sub(r"\1\n\n", text)


def strip_document(text: str) -> str:
    return text.strip()


PASSES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("collapse_spaces", collapse_spaces),
    ("collapse_blank_lines", collapse_blank_lines),
    ("canonicalize_bullets", canonicalize_bullets),
    ("canonicalize_numbering", canonicalize_numbering),
    ("promote_caps_headings", promote_caps_headings),
    ("space_before_headings", space_before_headings),
    ("space_after_headings", space_after_headings),
    ("strip_document", strip_document),
)


def normalize(text: Optional[str]) -> str:
    """Apply every pass in PASSES, in order."""
    result = "" if text is None else str(text)
    for _, transform in PASSES:
        result = transform(result)
    return result
