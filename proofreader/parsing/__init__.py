"""Parsing of model responses into error records."""

from __future__ import annotations

from .response_parser import (
    GRAMMARS,
    NO_ERRORS_MARKER,
    ParsedLine,
    ParseSummary,
    ResponseParser,
    parse,
    parse_response,
)

__all__ = [
    "GRAMMARS",
    "NO_ERRORS_MARKER",
    "ParsedLine",
    "ParseSummary",
    "ResponseParser",
    "parse",
    "parse_response",
]
