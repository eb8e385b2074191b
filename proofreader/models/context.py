"""Caller-supplied context for a proofreading run."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import InputError

_YEAR_RANGE_PATTERN = re.compile(r"^\s*(\d{4})\s*(?:(?:-|–|—|to)\s*(\d{4}))?\s*$")


class DateContext(BaseModel):
    """Inclusive year range used to validate weekday/date mentions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: int = Field(ge=1, le=9999)
    end: int = Field(ge=1, le=9999)

    @model_validator(mode="after")
    def _check_order(self) -> "DateContext":
        if self.end < self.start:
            raise ValueError("end year must not precede start year")
        return self

    @classmethod
    def single(cls, year: int) -> "DateContext":
        return cls(start=year, end=year)

    @classmethod
    def parse(cls, value: str | int) -> "DateContext":
        """Parse ``"2025"``, ``"2025-2026"`` or ``"2025 to 2026"``.

        Raises:
            InputError: when the value is not a year or a valid year range.
        """
        if isinstance(value, int):
            return cls.single(value)
        match = _YEAR_RANGE_PATTERN.match(value or "")
        if not match:
            raise InputError(
                f"Invalid year format {value!r}; expected e.g. 2025 or 2025-2026"
            )
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        if end < start:
            raise InputError(f"Invalid year range {value!r}; end precedes start")
        try:
            return cls(start=start, end=end)
        except ValidationError as exc:
            raise InputError(f"Invalid year {value!r}") from exc

    @property
    def years(self) -> range:
        return range(self.start, self.end + 1)

    def describe(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


class ProjectMetadata(BaseModel):
    """Free-form document information prepended to the model prompt."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    document_type: str
    notes: str = ""

    @field_validator("document_type", "notes", mode="before")
    def _strip_strings(cls, value: object) -> str:
        return str(value or "").strip()


class ProofreadContext(BaseModel):
    """Everything a run needs besides the text itself."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    date_years: DateContext
    project: ProjectMetadata
