"""Command-line interface."""

import argparse

from rimeguard.core.phrase_types import PhraseType


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    type_names = ", ".join(phrase_type.value for phrase_type in PhraseType)
    parser = argparse.ArgumentParser(
        prog="rimeguard",
        description="Check a batch of dictionary pull requests for conflicts and predict weights",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Check a batch against a JSON phrase dump
  %(prog)s --store phrases.json --batch batch.json

  # Against a SQLite database, JSON results to a file
  %(prog)s -s keytao.db -b batch.json --format json -o results.json

  # Using a JSON config (CLI overrides JSON)
  %(prog)s --config config.json --strict

  # Trace one code through every stage
  %(prog)s -s phrases.json -b batch.json -v --debug --debug-codes rjgl

Batch file: a JSON array of items (or {{"items": [...]}}), e.g.
  [
    {{"id": "1", "action": "Create", "word": "茹果", "code": "rjgl", "type": "Phrase"}},
    {{"id": "2", "action": "Delete", "word": "如果", "code": "rjgl"}},
    {{"id": "3", "action": "Change", "oldWord": "词二", "word": "词二改", "code": "chain"}}
  ]

Phrase types: {type_names}

Example config.json:
{{
  "store": "phrases.json",
  "batch": "batch.json",
  "format": "text",
  "type_weights": {{"Phrase": 120}},
  "strict": true,
  "verbose": true
}}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input
    parser.add_argument(
        "-s", "--store", type=str, help="Phrase store: .json dump or .db/.sqlite database"
    )
    parser.add_argument("-b", "--batch", type=str, help="JSON file with the batch items")

    # Output
    parser.add_argument("-o", "--output", type=str, help="Report file (default: stdout)")
    parser.add_argument("--format", choices=["text", "json"], help="Report format (default: text)")

    # Parameters
    parser.add_argument(
        "--type-weight",
        dest="type_weights",
        action="append",
        metavar="TYPE=WEIGHT",
        help="Override the default weight of a phrase type (repeatable)",
    )

    # Flags
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with status 1 when any item is blocked",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="Verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", default=None, help="Debug output (implies --verbose)"
    )
    parser.add_argument(
        "--debug-codes",
        type=str,
        help="Comma-separated codes to trace (requires --debug and --verbose)",
    )

    return parser
