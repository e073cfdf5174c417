"""CLI entry point for the markup cleaner."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from markup_cleaner.cleaning import get_cleaner
from markup_cleaner.converter import clean_to_html, convert_markup_to_markdown, to_markdown_output
from markup_cleaner.errors import MarkupCleanerError
from markup_cleaner.utils.config import settings
from markup_cleaner.utils.logger import get_logger, set_level
from markup_cleaner.web.fetcher import fetch_page, is_url

log = get_logger(__name__)

MODES = ("clean", "convert", "html", "remote")


def read_source(source: Optional[str]) -> Optional[str]:
    """Read markup from a URL, a file path, or stdin (``-`` / None)."""
    if source is None or source == "-":
        return sys.stdin.read()
    if is_url(source):
        log.info("Fetching %s", source)
        return fetch_page(source)
    return Path(source).read_text(encoding="utf-8")


def run(raw: str, mode: str) -> str:
    """Apply *mode* to *raw* markup and return the result text."""
    if mode == "convert":
        return convert_markup_to_markdown(raw)
    if mode == "html":
        return clean_to_html(raw)
    strategy = "remote" if mode == "remote" else "local"
    return get_cleaner(strategy).clean(raw).cleaned_html


def write_output(text: str, path: str) -> Path:
    """Write *text* to *path*; ``.md`` targets always receive Markdown."""
    target = Path(path)
    if target.suffix.lower() == ".md":
        text = to_markdown_output(text)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text + "\n", encoding="utf-8")
    return target


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Strip scripts, styles and page chrome from markup")
    parser.add_argument("source", nargs="?", help="File path, http(s) URL, or '-' for stdin")
    parser.add_argument("--mode", "-m", choices=MODES, default="clean",
                        help="clean: sanitize + Markdown (default); convert: Markdown without "
                             "sanitizing; html: sanitized HTML fragment; remote: model-based HTML")
    parser.add_argument("--output", "-o", nargs="?", const=settings.output_file,
                        help=f"Write the result to a file (default name: {settings.output_file})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        raw = read_source(args.source)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if raw is None:
        print(f"Error: could not fetch {args.source}", file=sys.stderr)
        return 1

    try:
        result = run(raw, args.mode)
    except MarkupCleanerError as exc:
        log.debug("Cleaning failed in mode %s", args.mode, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        target = write_output(result, args.output)
        log.info("Wrote %s", target)
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
