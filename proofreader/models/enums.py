"""Enumerations used by the proofreading error records.

The values are serialised verbatim into CSV exports and CLI output, so they
are intentionally lowercase and human-readable.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Provenance/category of an error record.

    The declaration order is the display priority used by the merger:
    date problems first, model-derived findings last.
    """

    DATE = "date"
    CAPITALIZATION = "capitalization"
    ACCENT = "accent"
    STYLE = "style"
    MODEL_DERIVED = "model_derived"

    @property
    def priority(self) -> int:
        return _KIND_PRIORITY[self]

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


_KIND_PRIORITY = {kind: index for index, kind in enumerate(ErrorKind)}


# Used when a record carries no explanation of its own.
DEFAULT_EXPLANATIONS = {
    ErrorKind.DATE: "The weekday does not match the calendar date.",
    ErrorKind.CAPITALIZATION: "Brand style requires this term to be capitalized.",
    ErrorKind.ACCENT: "This word requires its accent marks.",
    ErrorKind.STYLE: "House style replaces this term.",
    ErrorKind.MODEL_DERIVED: "Suggested by the AI proofreader.",
}


class StyleSubstitutionMode(str, Enum):
    """How often the workforce substitution rule may fire per document."""

    ONCE_PER_DOCUMENT = "once_per_document"
    PER_OCCURRENCE = "per_occurrence"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
