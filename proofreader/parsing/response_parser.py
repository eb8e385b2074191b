"""Extract structured corrections from free-form model output.

The model is asked for one bullet per issue, but in practice it drifts
between a handful of shapes. Each shape is a small grammar function that
returns a :class:`ParsedLine` or ``None``; grammars are tried in order and
the first match wins::

    - Page 2 > "resume" should be "résumé" | EXPLAIN: spelling
    - Page 2 > "resume" should be "résumé"
    - Menu > Add accent: "Rose" → "Rosé"
    - Hours > Change "18-holes" to "18 holes"

Lines that match no grammar are skipped and counted, never fatal.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from proofreader.models import ErrorKind, ErrorRecord
from proofreader.utils.page_utils import page_number_from_location

LOGGER = logging.getLogger(__name__)

NO_ERRORS_MARKER = "no errors found"

_BULLET_PATTERN = re.compile(r"^\s*-\s+(?P<payload>.*\S)\s*$")
_EXPLAIN_DELIMITER = re.compile(r"\s*\|\s*EXPLAIN\s*:\s*", re.IGNORECASE)
# The first ">" that is not escaped and not part of an arrow ("->", "=>").
_LOCATION_DELIMITER = re.compile(r"(?<![\\\-=])>")

_QUOTE = "[\"“”]"
_QUOTED = "[^\"“”]"
_SHOULD_BE_QUOTED = re.compile(
    rf"{_QUOTE}(?P<error>{_QUOTED}+){_QUOTE}\s+should\s+be\s+{_QUOTE}(?P<correction>{_QUOTED}*){_QUOTE}",
    re.IGNORECASE,
)
_SHOULD_BE_PLAIN = re.compile(
    r"^(?P<error>.+?)\s+should\s+be\s+(?P<correction>.+)$", re.IGNORECASE
)
_ARROW = re.compile(
    rf"{_QUOTE}(?P<error>{_QUOTED}+){_QUOTE}\s*(?:→|->|=>|—|–|-)\s*{_QUOTE}(?P<correction>{_QUOTED}*){_QUOTE}"
)
_CHANGE_TO = re.compile(
    rf"\bchange\s+{_QUOTE}(?P<error>{_QUOTED}+){_QUOTE}\s+to\s+{_QUOTE}(?P<correction>{_QUOTED}*){_QUOTE}",
    re.IGNORECASE,
)

_LOCATION_STRIP_CHARS = " \t\"'“”‘’`*[]"
# (opening, closing) pairs that may enclose a whole field.
_ENCLOSING_QUOTES = (
    ("\"“”", "\"“”"),
    ("'", "'"),
    ("‘", "’"),
    ("`", "`"),
)


@dataclass(frozen=True)
class ParsedLine:
    """Fields recovered from one bullet line."""

    location: str
    error_text: str
    correction_text: str
    explanation: str | None = None


Grammar = Callable[[str, Optional[str]], Optional[ParsedLine]]


@dataclass
class ParseSummary:
    """Outcome of parsing one model response."""

    records: list[ErrorRecord] = field(default_factory=list)
    bullet_lines: int = 0
    skipped_lines: list[str] = field(default_factory=list)
    no_errors: bool = False

    @property
    def skipped(self) -> int:
        return len(self.skipped_lines)


def _clean(value: str | None) -> str:
    """Trim whitespace and at most one enclosing quote pair.

    Apostrophes that belong to the text ("'til", "Members'") are kept.
    """
    text = (value or "").strip()
    if len(text) < 2:
        return text
    for openers, closers in _ENCLOSING_QUOTES:
        if text[0] in openers and text[-1] in closers:
            return text[1:-1].strip()
    return text


def _split_location(body: str) -> tuple[str, str]:
    """Split on the first unescaped ``>``; the remainder is kept intact."""
    match = _LOCATION_DELIMITER.search(body)
    if match is None:
        return "", body
    location = body[: match.start()].strip().strip(_LOCATION_STRIP_CHARS).strip()
    return location, body[match.end() :].strip()


def _build(location: str, error: str, correction: str, explanation: str | None) -> ParsedLine | None:
    error_text = _clean(error)
    correction_text = _clean(correction)
    if not error_text and not correction_text:
        return None
    return ParsedLine(
        location=location,
        error_text=error_text,
        correction_text=correction_text,
        explanation=(explanation or "").strip() or None,
    )


def _parse_should_be(body: str, explanation: str | None) -> ParsedLine | None:
    location, rest = _split_location(body)
    match = _SHOULD_BE_QUOTED.search(rest)
    if match is None:
        match = _SHOULD_BE_PLAIN.match(rest)
    if match is None:
        return None
    return _build(location, match.group("error"), match.group("correction"), explanation)


def parse_should_be_with_explanation(body: str, explanation: str | None) -> ParsedLine | None:
    """``location > "error" should be "correction" | EXPLAIN: explanation``"""
    if explanation is None:
        return None
    return _parse_should_be(body, explanation)


def parse_should_be(body: str, explanation: str | None) -> ParsedLine | None:
    """``location > "error" should be "correction"``"""
    if explanation is not None:
        return None
    return _parse_should_be(body, None)


def parse_arrow(body: str, explanation: str | None) -> ParsedLine | None:
    """``location > Capitalize "error" → "correction"``

    Text in front of the quoted pair ("Capitalize", "Add accent:") becomes the
    explanation when the line carries none.
    """
    location, rest = _split_location(body)
    match = _ARROW.search(rest)
    if match is None:
        return None
    if explanation is None:
        explanation = rest[: match.start()].strip().rstrip(":").strip() or None
    return _build(location, match.group("error"), match.group("correction"), explanation)


def parse_change_to(body: str, explanation: str | None) -> ParsedLine | None:
    """``location > Change "error" to "correction"``"""
    location, rest = _split_location(body)
    match = _CHANGE_TO.search(rest)
    if match is None:
        return None
    return _build(location, match.group("error"), match.group("correction"), explanation)


GRAMMARS: tuple[Grammar, ...] = (
    parse_should_be_with_explanation,
    parse_should_be,
    parse_arrow,
    parse_change_to,
)


class ResponseParser:
    """Tolerant parser for bullet-list model responses."""

    def __init__(self, grammars: Sequence[Grammar] = GRAMMARS) -> None:
        self._grammars = tuple(grammars)

    def parse_line(self, payload: str) -> ParsedLine | None:
        """Try each grammar against a bullet payload (marker already removed)."""
        parts = _EXPLAIN_DELIMITER.split(payload, maxsplit=1)
        body = parts[0]
        explanation = parts[1] if len(parts) == 2 else None
        for grammar in self._grammars:
            parsed = grammar(body, explanation)
            if parsed is not None:
                return parsed
        return None

    def parse_response(self, response_text: str) -> ParseSummary:
        summary = ParseSummary()
        # The marker wins over any bullet-like content in the same response.
        if NO_ERRORS_MARKER in (response_text or "").lower():
            LOGGER.debug("Model response reports no errors")
            summary.no_errors = True
            return summary

        for line in (response_text or "").splitlines():
            bullet = _BULLET_PATTERN.match(line)
            if bullet is None:
                continue
            summary.bullet_lines += 1
            parsed = self.parse_line(bullet.group("payload"))
            if parsed is None:
                LOGGER.debug("Skipping unparsable response line: %r", line.strip())
                summary.skipped_lines.append(line.strip())
                continue
            location = parsed.location or f"Issue {len(summary.records) + 1}"
            summary.records.append(
                ErrorRecord(
                    location=location,
                    error_text=parsed.error_text,
                    correction_text=parsed.correction_text,
                    kind=ErrorKind.MODEL_DERIVED,
                    explanation=parsed.explanation,
                    page_number=page_number_from_location(location),
                    rule_id="MODEL",
                )
            )

        if summary.skipped:
            LOGGER.info(
                "Parsed %d of %d bullet line(s); %d skipped",
                len(summary.records),
                summary.bullet_lines,
                summary.skipped,
            )
        return summary

    def parse(self, response_text: str) -> list[ErrorRecord]:
        return self.parse_response(response_text).records


_DEFAULT_PARSER = ResponseParser()


def parse(response_text: str) -> list[ErrorRecord]:
    """Return the records found in ``response_text`` (``[]`` for "No errors found")."""
    return _DEFAULT_PARSER.parse(response_text)


def parse_response(response_text: str) -> ParseSummary:
    return _DEFAULT_PARSER.parse_response(response_text)


__all__ = [
    "GRAMMARS",
    "NO_ERRORS_MARKER",
    "ParseSummary",
    "ParsedLine",
    "ResponseParser",
    "parse",
    "parse_arrow",
    "parse_change_to",
    "parse_response",
    "parse_should_be",
    "parse_should_be_with_explanation",
]
