from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofreader.models import ErrorKind, ErrorRecord
from proofreader.review import dedupe_model_errors, merge


def _record(kind: ErrorKind, error: str, location: str = "Line 1") -> ErrorRecord:
    return ErrorRecord(
        location=location,
        error_text=error,
        correction_text=error.upper(),
        kind=kind,
    )


def test_merge_orders_by_kind_priority() -> None:
    rule_errors = [
        _record(ErrorKind.STYLE, "staff"),
        _record(ErrorKind.CAPITALIZATION, "member"),
        _record(ErrorKind.ACCENT, "cafe"),
        _record(ErrorKind.DATE, "monday"),
    ]
    model_errors = [_record(ErrorKind.MODEL_DERIVED, "teh")]

    merged = merge(rule_errors, model_errors)

    assert [r.kind for r in merged] == [
        ErrorKind.DATE,
        ErrorKind.CAPITALIZATION,
        ErrorKind.ACCENT,
        ErrorKind.STYLE,
        ErrorKind.MODEL_DERIVED,
    ]


def test_merge_is_stable_within_a_kind() -> None:
    rule_errors = [
        _record(ErrorKind.CAPITALIZATION, "guest"),
        _record(ErrorKind.CAPITALIZATION, "member"),
        _record(ErrorKind.CAPITALIZATION, "team"),
    ]

    merged = merge(rule_errors, [])

    assert [r.error_text for r in merged] == ["guest", "member", "team"]


def test_merge_is_idempotent() -> None:
    rule_errors = [_record(ErrorKind.STYLE, "staff"), _record(ErrorKind.DATE, "monday")]
    model_errors = [_record(ErrorKind.MODEL_DERIVED, "teh")]

    first = merge(rule_errors, model_errors)
    second = merge(rule_errors, model_errors)

    assert first == second
    assert merge(first, []) == first


def test_identical_model_findings_are_collapsed() -> None:
    duplicate = _record(ErrorKind.MODEL_DERIVED, "teh", location="Page 1")
    model_errors = [duplicate, _record(ErrorKind.MODEL_DERIVED, "teh", location="page 1")]

    assert dedupe_model_errors(model_errors) == [duplicate]


def test_same_text_at_different_locations_is_kept() -> None:
    model_errors = [
        _record(ErrorKind.MODEL_DERIVED, "teh", location="Page 1"),
        _record(ErrorKind.MODEL_DERIVED, "teh", location="Page 2"),
    ]

    assert len(merge([], model_errors)) == 2


def test_rule_records_are_never_collapsed() -> None:
    rule_errors = [_record(ErrorKind.ACCENT, "cafe"), _record(ErrorKind.ACCENT, "cafe")]

    assert len(merge(rule_errors, [])) == 2


def test_empty_inputs() -> None:
    assert merge([], []) == []
