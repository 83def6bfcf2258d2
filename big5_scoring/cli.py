"""
Big Five — Scoring Command-Line Interface

Subcommands:

  items     — List the questionnaire statements with trait, aspect and keying.
  validate  — Check a response file and report every problem found.
  score     — Score a response file and print the result as JSON.
  describe  — Print the band description for one trait or aspect.

Usage examples
--------------
  big5 items
  big5 validate answers.json
  big5 score answers.json --profile --indent 2
  big5 describe Compassion 72.5

A response file holds either a JSON list of 100 labels
(``"StronglyDisagree"`` … ``"StronglyAgree"``) or an object with a
``"responses"`` list.

Exit status is 0 on success, 1 for invalid input and 2 when the scoring
model data cannot be loaded.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import structlog

from big5_scoring.exceptions import ModelDataUnavailable, ResponseValidationError
from big5_scoring.log_config import configure_logging
from big5_scoring.services.descriptions_service import DescriptionsService
from big5_scoring.services.scoring_service import get_scoring_service

logger = structlog.get_logger("big5.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_MODEL_UNAVAILABLE = 2


# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────

def _load_responses(path: str) -> Any:
    """Read a response file; returns the raw list (or whatever was found)."""
    with open(Path(path), encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "responses" in data:
        return data["responses"]
    return data


def _print_json(payload: Any, indent: Optional[int] = None) -> None:
    print(json.dumps(payload, indent=indent, ensure_ascii=False))


# ──────────────────────────────────────────────────────────────────────────────
# Subcommands
# ──────────────────────────────────────────────────────────────────────────────

def cmd_items(args: argparse.Namespace) -> int:
    service = get_scoring_service()
    for item in service.get_questionnaire_items():
        keying = "-" if item.reverse else "+"
        print(f"{item.index:>3}  {item.aspect.trait.value:<18} {item.aspect.value:<16} {keying}  {item.text}")
    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    service = get_scoring_service()
    result = service.validate_responses(_load_responses(args.file))
    if result.valid:
        print(f"OK: {service.expected_count} valid responses")
        return EXIT_OK
    for message in result.errors:
        print(message)
    return EXIT_INVALID


def cmd_score(args: argparse.Namespace) -> int:
    service = get_scoring_service()
    responses = _load_responses(args.file)
    try:
        result = (
            service.generate_profile(responses)
            if args.profile
            else service.predict_from_responses(responses)
        )
    except ResponseValidationError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return EXIT_INVALID
    print(result.to_json(indent=args.indent))
    return EXIT_OK


def cmd_describe(args: argparse.Namespace) -> int:
    try:
        description = DescriptionsService().describe(args.dimension, args.percentile)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    _print_json(description.model_dump(mode="json", by_alias=True), indent=args.indent)
    return EXIT_OK


# ──────────────────────────────────────────────────────────────────────────────
# CLI entry point
# ──────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="big5",
        description="Big Five aspect scoring: questionnaire, validation, scoring and descriptions.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available subcommands")

    # ── items ─────────────────────────────────────────────────────────
    items_parser = subparsers.add_parser(
        "items", help="List the questionnaire statements with trait, aspect and keying."
    )
    items_parser.set_defaults(func=cmd_items)

    # ── validate ──────────────────────────────────────────────────────
    validate_parser = subparsers.add_parser(
        "validate", help="Report every problem in a response file."
    )
    validate_parser.add_argument("file", help="JSON response file.")
    validate_parser.set_defaults(func=cmd_validate)

    # ── score ─────────────────────────────────────────────────────────
    score_parser = subparsers.add_parser("score", help="Score a response file.")
    score_parser.add_argument("file", help="JSON response file.")
    score_parser.add_argument(
        "--profile",
        action="store_true",
        default=False,
        help="Include the narrative summary and detailed analysis.",
    )
    score_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print the JSON output with this indent.",
    )
    score_parser.set_defaults(func=cmd_score)

    # ── describe ──────────────────────────────────────────────────────
    describe_parser = subparsers.add_parser(
        "describe", help="Describe a trait or aspect at a percentile."
    )
    describe_parser.add_argument("dimension", help="Trait or aspect name, e.g. Compassion.")
    describe_parser.add_argument("percentile", type=float, help="Percentile in [0, 100].")
    describe_parser.add_argument("--indent", type=int, default=2)
    describe_parser.set_defaults(func=cmd_describe)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_INVALID

    configure_logging()

    try:
        return args.func(args)
    except ModelDataUnavailable as exc:
        logger.error("model_data_unavailable", error=exc.message, details=exc.details)
        print(f"error: {exc.message}", file=sys.stderr)
        return EXIT_MODEL_UNAVAILABLE
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        print(f"error: could not read {getattr(args, 'file', '')}: {exc}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
