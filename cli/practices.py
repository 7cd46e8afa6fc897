#!/usr/bin/env python3
"""CLI for loading practice sources and querying them."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from practicekb.core import CATEGORIES, SEVERITIES
from practicekb.provider import BestPracticesProvider, PracticeQuery
from practicekb.sources import load_config

load_dotenv()


def print_practice_list(documents):
    for i, doc in enumerate(documents, 1):
        meta = doc.metadata
        print(f"{i}. [{meta.get('severity', '-')}] {doc.title}")
        print(f"   {doc.id} ({meta.get('category')}, {meta.get('language')})")


def main():
    parser = argparse.ArgumentParser(description="Load and search coding best practices")
    parser.add_argument("--config", type=Path, help="Path to YAML/JSON config file")
    parser.add_argument("--query", "-q", type=str, help="Search query")
    parser.add_argument("--results", "-n", type=int, help="Maximum number of results")
    parser.add_argument("--category", choices=CATEGORIES, help="Filter by practice category")
    parser.add_argument("--language", help="Filter by programming language")
    parser.add_argument("--framework", help="Filter by framework")
    parser.add_argument(
        "--severity",
        choices=SEVERITIES,
        help="Filter by severity level"
    )
    parser.add_argument("--lint-rule", help="Show practices for a lint rule")
    parser.add_argument("--get", metavar="ID", help="Show a practice by id")
    parser.add_argument("--examples", action="store_true", help="Show code examples for the query")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    provider = BestPracticesProvider(load_config(args.config))
    report = provider.sync()
    for name, error in report.failed_sources.items():
        print(f"Warning: source '{name}' failed: {error}", file=sys.stderr)

    if args.get:
        practice = provider.get_practice(args.get)
        if practice is None:
            print(f"Practice not found: {args.get}", file=sys.stderr)
            sys.exit(1)
        print(practice["content"])
        return

    if args.lint_rule:
        print_practice_list(provider.get_practices_for_lint_rule(args.lint_rule))
        return

    if args.query and args.examples:
        for example in provider.get_examples(args.query, language=args.language):
            print(f"## {example['practice']} ({example['language']})")
            if example["goodExample"]:
                print(f"Good:\n{example['goodExample']}\n")
            if example["badExample"]:
                print(f"Bad:\n{example['badExample']}\n")
        return

    if args.query:
        query = PracticeQuery(
            query=args.query,
            category=args.category,
            language=args.language,
            framework=args.framework,
            severity=args.severity,
            limit=args.results,
        )
        results = provider.search_practices(query)
        print(f"Query: {args.query}")
        print(f"Found {len(results)} results:\n")
        for i, result in enumerate(results, 1):
            print(f"{i}. {result.document.title} (score: {result.score:.3f})")
            print(f"   {result.document.id}")
        return

    if args.category:
        print_practice_list(provider.get_practices_by_category(
            args.category,
            language=args.language,
            severity=args.severity,
            limit=args.results or 20,
        ))
        return

    summary = provider.list_categories(language=args.language)
    print(f"Loaded {report.documents} documents, {summary['totalPractices']} practices")
    for entry in summary["categories"]:
        severities = ", ".join(f"{k}: {v}" for k, v in entry["severities"].items())
        print(f"  {entry['name']}: {entry['count']} ({severities})")


if __name__ == "__main__":
    main()
