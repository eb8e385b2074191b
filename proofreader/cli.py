"""Command-line interface for the brand style proofreader."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from proofreader.config import load_configuration
from proofreader.converters import extract_pdf_text, read_text_file
from proofreader.llm.provider import AuthError, LLMProviderError
from proofreader.llm.provider_registry import available_providers
from proofreader.models import DateContext, InputError, ProjectMetadata, ProofreadContext
from proofreader.report import (
    build_report_markdown,
    build_report_text,
    render_csv,
)
from proofreader.review import Proofreader, ProofreadResult

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PROVIDER_FAILURE = 1
EXIT_INPUT_ERROR = 2


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Proofread brand-style documents with rule checks and an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Proofread pasted text for the 2025 season
  python -m proofreader --text "Our member club has a great staff." --document-type Newsletter --years 2025

  # Proofread a PDF flyer spanning two years, writing a Markdown report
  python -m proofreader --pdf flyer.pdf --document-type Flyer --years 2025-2026 --format markdown --output report.md

  # Rule checks only (no API key or network needed)
  python -m proofreader --text-file menu.txt --document-type Menu --years 2025 --rules-only

Environment Variables:
  PROOFREADER_API_KEY              API key sent to the model (fallback: ANTHROPIC_API_KEY)
  PROOFREADER_RELAY_URL            Relay endpoint (default: local netlify function)
  PROOFREADER_MODEL                Model id (default: claude-3-haiku-20240307)
  PROOFREADER_REQUEST_TIMEOUT      HTTP timeout in seconds (default: 60)
  PROOFREADER_MIN_TEXT_LENGTH      Minimum non-space characters (default: 5)
  PROOFREADER_STYLE_MODE           once_per_document or per_occurrence
  PROOFREADER_DEGRADE_ON_MALFORMED Return rule results when the model reply is unusable (default: true)
  LLM_PRIMARY                      Primary LLM provider (default: relay)
  LLM_FALLBACK                     Fallback providers (comma-separated)
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to proofread")
    source.add_argument("--text-file", type=Path, help="UTF-8 text file to proofread")
    source.add_argument("--pdf", type=Path, help="PDF file to proofread (max 10 MB)")

    parser.add_argument(
        "--document-type",
        required=True,
        help="Kind of document, e.g. Newsletter, Menu, Event Flyer",
    )
    parser.add_argument(
        "--years",
        required=True,
        help="Year or year range used to check dates (e.g. 2025 or 2025-2026)",
    )
    parser.add_argument("--notes", default="", help="Extra notes passed to the model")

    parser.add_argument(
        "--rules-only",
        action="store_true",
        help="Run the deterministic rule checks without calling the model",
    )
    parser.add_argument(
        "--format",
        choices=("text", "csv", "markdown"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--include-explanations",
        action="store_true",
        help="Append '| EXPLAIN: ...' to text output lines",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this path instead of stdout",
    )

    parser.add_argument(
        "--provider",
        choices=available_providers(),
        help="Primary LLM provider (default: relay or LLM_PRIMARY)",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        help="Path to .env file for API keys",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def load_source_text(args: argparse.Namespace) -> str:
    if args.pdf is not None:
        return extract_pdf_text(args.pdf).text
    if args.text_file is not None:
        return read_text_file(args.text_file).text
    return args.text


def render_result(result: ProofreadResult, args: argparse.Namespace) -> str:
    if args.format == "csv":
        return render_csv(result.errors)
    if args.format == "markdown":
        return build_report_markdown(
            result.errors,
            document_type=args.document_type,
            warnings=result.warnings,
        ) + "\n"
    text = build_report_text(result.errors, include_explanations=args.include_explanations)
    return (text or result.summary()) + "\n"


def write_output(content: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    print(f"Report written to {output.resolve()}", file=sys.stderr)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        configuration = load_configuration(dotenv_path=args.dotenv)
        context = ProofreadContext(
            date_years=DateContext.parse(args.years),
            project=ProjectMetadata(document_type=args.document_type, notes=args.notes),
        )
        text = load_source_text(args)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        if args.rules_only:
            proofreader = Proofreader(None, configuration=configuration)
            result = proofreader.run_rules_only(text, context)
        else:
            proofreader = Proofreader.from_configuration(configuration, provider=args.provider)
            result = proofreader.run(text, context)
    except AuthError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_PROVIDER_FAILURE
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    if not result.ok:
        print(f"Error: {result.summary()}", file=sys.stderr)
        if isinstance(result.failure, InputError):
            return EXIT_INPUT_ERROR
        if isinstance(result.failure, LLMProviderError) and result.failure.status_code:
            print(f"HTTP status: {result.failure.status_code}", file=sys.stderr)
        return EXIT_PROVIDER_FAILURE

    for warning in result.warnings:
        LOGGER.warning("%s", warning)
    write_output(render_result(result, args), args.output)
    print(result.summary(), file=sys.stderr)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
