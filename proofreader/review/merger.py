"""Combine rule findings and model findings into one display order."""

from __future__ import annotations

from typing import Iterable

from proofreader.models import ErrorKind, ErrorRecord


def _model_key(record: ErrorRecord) -> tuple[str, str, str]:
    return (
        record.location.casefold(),
        record.error_text.casefold(),
        record.correction_text,
    )


def dedupe_model_errors(model_errors: Iterable[ErrorRecord]) -> list[ErrorRecord]:
    """Drop repeated model findings, keeping the first occurrence."""
    seen: set[tuple[str, str, str]] = set()
    unique: list[ErrorRecord] = []
    for record in model_errors:
        if record.kind is ErrorKind.MODEL_DERIVED:
            key = _model_key(record)
            if key in seen:
                continue
            seen.add(key)
        unique.append(record)
    return unique


def merge(
    rule_errors: Iterable[ErrorRecord],
    model_errors: Iterable[ErrorRecord],
) -> list[ErrorRecord]:
    """Concatenate both lists and stable-sort them by kind priority.

    Priority: date, capitalization, accent, style, model-derived. Records of
    the same kind keep their relative order, so the result is deterministic
    and merging the same inputs twice gives the same list.
    """
    combined = [*rule_errors, *dedupe_model_errors(model_errors)]
    return sorted(combined, key=lambda record: record.kind.priority)
