"""CLI entrypoint: capture a web article for translation."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv

from pipeline import DEFAULT_TARGET_LANG, capture_url

_EPILOG = """Notes:
  - Fetches HTML, extracts the main article (readability), converts it to Markdown
  - Writes source.md + meta.json under CONTENT_ROOT/<slug>/ (default content/articles)
  - Generates a translation prompt for an external translation agent (does NOT call a model)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="url2translate",
        description="Capture a web article as Markdown plus a translation prompt",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", help="Article URL to capture")
    parser.add_argument(
        "--lang",
        default=DEFAULT_TARGET_LANG,
        help=f"Target language code for the translation prompt (default: {DEFAULT_TARGET_LANG})",
    )
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line flags."""
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Initialize config, run one capture and print the JSON summary.

    Returns the process exit status: 0 on success, 1 when the capture
    fails and 2 when no arguments are given.
    """
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        build_parser().print_help()
        return 2

    args = parse_args(argv)

    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        result = capture_url(args.url, lang=args.lang)
    except Exception as exc:
        logging.error("Capture failed for %s: %s", args.url, exc)
        return 1

    print(json.dumps(result.to_summary(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
