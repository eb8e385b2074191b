"""Tests for weekday/date validation."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofreader.models import DateContext, ErrorKind
from proofreader.rules import DateValidator, find_date_mentions
from proofreader.rules.date_validator import DATE_LOCATION, validate

YEAR_2025 = DateContext.single(2025)


def test_wrong_weekday_is_corrected_for_the_start_year() -> None:
    records = validate("Join us Monday, December 31 for the gala.", YEAR_2025)

    assert len(records) == 1
    record = records[0]
    assert record.location == DATE_LOCATION
    assert record.kind is ErrorKind.DATE
    assert record.error_text == "Monday, December 31"
    assert record.correction_text == "Wednesday, December 31"
    assert record.explanation == "December 31, 2025 is a Wednesday, not a Monday."


def test_correct_weekday_is_not_reported() -> None:
    assert validate("Wednesday, December 31", YEAR_2025) == []


def test_weekday_correct_in_any_year_of_range_is_valid() -> None:
    # December 31 2026 is a Thursday.
    assert validate("Thursday, December 31", DateContext.parse("2025-2026")) == []


def test_wrong_in_every_year_uses_start_year() -> None:
    records = validate("Monday, December 31", DateContext.parse("2025-2026"))

    assert [r.correction_text for r in records] == ["Wednesday, December 31"]
    assert "from 2025 to 2026" in records[0].explanation


def test_repeated_phrase_is_reported_once() -> None:
    text = "Monday, December 31 at noon.\nSee you Monday, December 31!"

    assert len(validate(text, YEAR_2025)) == 1


def test_month_first_and_ordinal_day() -> None:
    records = validate("December 31st, Monday", YEAR_2025)

    assert [r.correction_text for r in records] == ["December 31st, Wednesday"]


def test_abbreviated_month() -> None:
    # September 5 2025 is a Friday.
    records = validate("Monday, Sept. 5", YEAR_2025)

    assert [r.correction_text for r in records] == ["Friday, Sept. 5"]


def test_abbreviated_month_in_month_first_order() -> None:
    records = validate("Sept. 5, Monday", YEAR_2025)

    assert [(r.error_text, r.correction_text) for r in records] == [
        ("Sept. 5, Monday", "Sept. 5, Friday")
    ]


def test_lowercase_phrase_gets_title_case_weekday() -> None:
    records = validate("monday, december 31", YEAR_2025)

    assert records[0].error_text == "Monday, december 31"
    assert records[0].correction_text == "Wednesday, december 31"


@pytest.mark.parametrize(
    "text",
    [
        "Saturday & Sunday, May 16",
        "Saturday and Sunday, May 16",
        "Friday-Sunday, May 16",
        "Friday – Sunday, May 16",
        "Friday through Sunday, May 16",
        "Friday to Sunday, May 16",
    ],
)
def test_multi_day_range_is_not_validated(text: str) -> None:
    # May 16 2025 is a Friday, so the last weekday alone would be flagged.
    mentions = find_date_mentions(text)

    assert len(mentions) == 1
    assert mentions[0].is_range
    assert validate(text, YEAR_2025) == []


def test_nonexistent_date() -> None:
    records = validate("Monday, February 30", YEAR_2025)

    assert len(records) == 1
    assert records[0].correction_text == "February 30 does not exist"


def test_leap_day_falls_back_to_the_year_it_exists() -> None:
    # February 29 2024 is a Thursday.
    records = DateValidator().validate("Monday, February 29", DateContext.parse("2023-2024"))

    assert [r.correction_text for r in records] == ["Thursday, February 29"]
    assert "in 2024 it is a Thursday" in records[0].explanation


@pytest.mark.parametrize(
    "text",
    [
        "The meeting is in December.",
        "Monday mornings are quiet.",
        "Call 555-1234 on Monday.",
    ],
)
def test_text_without_dates(text: str) -> None:
    assert validate(text, YEAR_2025) == []
