"""
PrivMD - Local PDF-to-Markdown Converter

Extracts the text of every page of a PDF, rebuilds paragraph breaks from
the vertical position of each text run, and rewrites the result into
clean Markdown (bullets, numbered lists, headings, whitespace).
Everything runs locally; nothing leaves the machine.
"""

__version__ = "1.0.0"
