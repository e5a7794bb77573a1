#!/usr/bin/env python3

"""
cli.py

Entry point for the JSON schema explorer.

Reads a JSON document (an object or an array of objects), infers the
structural schema of every field and prints it as formatted JSON.

Version: 0.1.0
License: MIT
"""

import argparse
import logging
import sys

from .inference.inference_engine import SchemaInferenceEngine
from .inference.schema_core import SchemaExplorerError
from .inference.serializer import SchemaSerializer

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def build_parser():
    parser = argparse.ArgumentParser(
        prog="schema-explorer",
        description="Infer the schema of every field in a sample of JSON documents.",
    )
    parser.add_argument(
        "-f", "--file", required=True, help="Input JSON file (.gz, .bz2, .xz accepted)."
    )
    parser.add_argument(
        "-m",
        "--merge-objects",
        action="store_true",
        help="Merge every nested object of a field into one schema instead of "
        "splitting them by key set.",
    )
    parser.add_argument(
        "--compact", action="store_true", help="Emit compact JSON output."
    )
    parser.add_argument(
        "--sort-keys", action="store_true", help="Sort field names in the output."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    return parser


def configure_logging(verbosity):
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    engine = SchemaInferenceEngine(merge_objects=args.merge_objects)

    try:
        schema = engine.analyze_file(args.file)
    except SchemaExplorerError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: input is nested too deeply to analyze", file=sys.stderr)
        return 1

    print(
        SchemaSerializer.to_json(schema, compact=args.compact, sort_keys=args.sort_keys)
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
