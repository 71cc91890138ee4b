"""Command-line access to the result classifier and build-request NLU.

Usage:
    python -m wakti.tools classify results.json --updated-at "10:42"
    python -m wakti.tools intent "add user authentication login page"
    python -m wakti.tools analyze "barber shop with booking and contact form"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from wakti.config import SUPPORTED_LANGUAGES, Config
from wakti.nlu import (
    DetectedIntent,
    feature_to_wizard_type,
    get_intent_description,
)
from wakti.request_handler import RequestHandler
from wakti.search import InvalidSnippetPayloadError, load_snippets

logger = logging.getLogger("wakti")
LOGGER_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_CLI_HANDLER_TAG = "_wakti_cli_handler"


def configure_cli_logging(level: str | int) -> logging.Logger:
    """Configure package-scoped logging for the CLI.

    Leaves the root logger untouched and replaces any handler installed by a
    previous call, so repeated invocations stay idempotent.

    Args:
        level: Logging level name or number.

    Returns:
        Configured package logger.
    """
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, _CLI_HANDLER_TAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOGGER_FORMAT))
    setattr(handler, _CLI_HANDLER_TAG, True)
    logger.addHandler(handler)
    return logger


def read_payload(source: str) -> object:
    """Read and decode JSON from a file path, or stdin when ``source`` is "-".

    Raises:
        InvalidSnippetPayloadError: If the input cannot be read or decoded.
    """
    try:
        if source == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(source).read_text(encoding="utf-8")
        return json.loads(raw)
    except OSError as e:
        raise InvalidSnippetPayloadError(f"Cannot read {source}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidSnippetPayloadError(f"Invalid JSON in {source}: {e}") from e


def format_intent(intent: DetectedIntent, language: str = "en") -> str:
    """Format a detected intent as a single summary line."""
    templates = ", ".join(intent.suggested_question_templates) or "none"
    keywords = ", ".join(intent.keywords) or "none"
    return (
        f"{get_intent_description(intent, language)} [{intent.type.value}] "
        f"confidence={intent.confidence:.2f} "
        f"ask_questions={'yes' if intent.should_ask_questions else 'no'} "
        f"templates={templates} keywords={keywords}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wakti",
        description="Classify search results and analyze AI coder build requests",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        help="Output language (default: WAKTI_LANGUAGE or en)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser(
        "classify",
        help="Render search results as a sports or generic table",
    )
    classify_parser.add_argument(
        "source",
        help="JSON file with a result list or {'results': [...]}; '-' for stdin",
    )
    classify_parser.add_argument(
        "--updated-at",
        help="Freshness label printed above the table",
    )

    intent_parser = subparsers.add_parser("intent", help="Detect build-request intent")
    intent_parser.add_argument("prompt", help="Build request text")
    intent_parser.add_argument(
        "--all",
        action="store_true",
        help="List every intent with confidence >= 0.3",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Break a build request into ordered features",
    )
    analyze_parser.add_argument("prompt", help="Build request text")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        parser.error(str(e))

    configure_cli_logging("DEBUG" if args.verbose else config.log_level)
    language = args.language or config.language
    handler = RequestHandler(language=language)

    if args.command == "classify":
        try:
            snippets = load_snippets(read_payload(args.source))
        except InvalidSnippetPayloadError as e:
            parser.error(str(e))

        rendered = handler.render_search_results(snippets, updated_at=args.updated_at)
        if rendered is None:
            print("No search results.")
        else:
            print(rendered)
        return 0

    if args.command == "intent":
        if args.all:
            intents = handler.intent_detector.detect_multiple(args.prompt)
            if not intents:
                print("No confident intents.")
            for intent in intents:
                print(format_intent(intent, language))
        else:
            print(format_intent(handler.intent_detector.detect(args.prompt), language))
        return 0

    plan = handler.plan_build_request(args.prompt)
    session = handler.start_wizard(plan)
    print(f"Business type: {plan.analysis.business_type}")
    print(session.summary())
    if session.current_feature is not None:
        print(
            f"Next wizard: {session.current_feature.description} "
            f"({feature_to_wizard_type(session.current_feature.type)})"
        )
    if plan.needs_database_changes:
        print("Database changes likely.")
    return 0
