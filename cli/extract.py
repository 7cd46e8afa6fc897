#!/usr/bin/env python3
"""CLI for extracting practices from a single markdown style guide."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from practicekb.extraction import MarkdownPracticeExtractor


def main():
    parser = argparse.ArgumentParser(
        description="Extract practice documents from a markdown style guide"
    )
    parser.add_argument("file", type=Path, help="Markdown file to extract")
    parser.add_argument(
        "--source",
        default="local-practices",
        help="Source name used in document ids (default: local-practices)"
    )
    parser.add_argument("--language", help="Default language for practices")
    parser.add_argument("--framework", help="Default framework for practices")
    parser.add_argument(
        "--practices-only",
        action="store_true",
        help="Omit the whole-file overview document"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print warnings about ignored metadata"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    extractor = MarkdownPracticeExtractor(
        args.source,
        language=args.language,
        framework=args.framework,
    )
    documents = extractor.extract(text, args.file.name)
    if args.practices_only:
        documents = [doc for doc in documents if doc.type == "practice"]

    json.dump([asdict(doc) for doc in documents], sys.stdout, indent=2, ensure_ascii=False)
    print()


if __name__ == "__main__":
    main()
