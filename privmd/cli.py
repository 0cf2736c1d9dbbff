#!/usr/bin/env python3
"""
PrivMD CLI

Command-line interface for local PDF-to-Markdown conversion.

Usage:
    privmd report.pdf
    privmd https://example.com/whitepaper.pdf
    privmd ./papers/                      # convert every PDF in a directory
    privmd a.pdf b.pdf --stdout           # print instead of saving

Options:
    -o, --output DIR     Output directory (default: ./privmd_output)
    --stdout             Print Markdown to stdout instead of saving files
    --quiet              Only report errors
    --no-trailer         Omit the attribution line at the end
"""

import argparse
import os
import sys

from . import __version__
from .core import Converter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="privmd",
        description=(
            "PrivMD - Local PDF-to-Markdown Converter\n\n"
            "Extracts page text, rebuilds paragraphs and rewrites the result\n"
            "as Markdown. Nothing is uploaded anywhere."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  privmd policy.pdf\n"
            "  privmd ./papers/                  # whole directory\n"
            "  privmd report.pdf --stdout        # print to terminal\n"
            "  privmd report.pdf -o ./md_out     # custom output dir\n"
        ),
    )
    parser.add_argument("sources", nargs="*", help="PDF files, directories, or URLs to convert")
    parser.add_argument("-o", "--output", default=None, help="Output directory (default: ./privmd_output)")
    parser.add_argument("--stdout", action="store_true", help="Print Markdown to stdout instead of saving to files")
    parser.add_argument("--quiet", action="store_true", help="Only report errors")
    parser.add_argument("--no-trailer", action="store_true", help="Do not append the attribution line")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify PDF files, directories, or URLs to convert.")
        return 1

    save = not args.stdout
    engine = Converter(
        output_dir=args.output,
        verbose=not (args.quiet or args.stdout),
        include_trailer=not args.no_trailer,
    )

    if engine.verbose:
        print("=" * 60)
        print("  PRIVMD - Local PDF-to-Markdown Converter")
        print("=" * 60)
        print()

    results = []
    missing = 0
    for source in args.sources:
        try:
            if os.path.isdir(source):
                results.extend(engine.convert_directory(source, save=save))
            else:
                results.append(engine.convert_path(source, save=save))
        except OSError as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            missing += 1

    ok = [r for r in results if r.ok]
    errors = len(results) - len(ok) + missing

    if args.stdout:
        for i, result in enumerate(ok):
            if i:
                print("\n" + "=" * 60 + "\n")
            print(result.markdown)

    if engine.verbose:
        print()
        print("-" * 60)
        print(f"  Done: {len(ok)} converted, {errors} errors")
        if save:
            print(f"  Output: {os.path.abspath(engine.output_dir)}")
        print("-" * 60)

    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
