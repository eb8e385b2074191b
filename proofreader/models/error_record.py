"""Immutable error record shared by the rule engine and the response parser.

Every finding, whether produced by a deterministic rule or parsed from the
model response, is normalised into an :class:`ErrorRecord` so the merger and
the exporters only deal with one shape.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import DEFAULT_EXPLANATIONS, ErrorKind


class ErrorRecord(BaseModel):
    """A single located correction.

    Fields:
    - location: human-readable locator ("Line 12", "Date validation", "Page 2")
    - error_text: the offending text as written
    - correction_text: the suggested replacement, verbatim
    - kind: provenance/category, drives ranking
    - explanation: optional rationale; see ``display_explanation``
    - context: the match with surrounding text, the match wrapped in ``**``
    - page_number: page of the match when the text carries page markers
    - rule_id: identifier of the rule that produced the record
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    location: str
    error_text: str = ""
    correction_text: str = ""
    kind: ErrorKind
    explanation: str | None = None
    context: str = ""
    page_number: int | None = Field(default=None, ge=0)
    rule_id: str = ""

    @field_validator("location", "context", "rule_id", mode="before")
    def _strip_strings(cls, value: object) -> str:
        return str(value or "").strip()

    # Corrections are kept verbatim apart from the line break noise the model
    # sometimes leaves behind.
    @field_validator("error_text", "correction_text", mode="before")
    def _strip_text(cls, value: object) -> str:
        return str(value or "").strip("\r\n")

    @field_validator("explanation", mode="before")
    def _strip_explanation(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value).strip() or None

    @model_validator(mode="after")
    def final_checks(self) -> "ErrorRecord":
        if not self.location:
            raise ValueError("location must not be empty")
        if not self.error_text and not self.correction_text:
            raise ValueError("error_text and correction_text must not both be empty")
        return self

    @property
    def display_explanation(self) -> str:
        """Return the explanation, falling back to the per-kind default."""
        return self.explanation or DEFAULT_EXPLANATIONS[self.kind]

    def to_export_line(self, *, include_explanation: bool = False) -> str:
        """Render the record as one plain-text export line."""
        line = f'- {self.location} > "{self.error_text}" should be "{self.correction_text}"'
        if include_explanation and self.explanation:
            line += f" | EXPLAIN: {self.explanation}"
        return line
