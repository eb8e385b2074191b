"""Weekday/date consistency checks.

Recognises "Wednesday, March 5", "March 5th, Wednesday" and abbreviated
months ("Sept. 5, Friday") and checks the stated weekday against every year
of the caller's :class:`~proofreader.models.DateContext`. A mention is valid
if the weekday is right for at least one year in the range.

Multi-day mentions such as "Saturday & Sunday, May 16" are recognised as
ranges and are not validated, because the text does not say which of the
days the date belongs to.
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass

from proofreader.models import DateContext, ErrorKind, ErrorRecord

LOGGER = logging.getLogger(__name__)

DATE_LOCATION = "Date validation"

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_MONTH_ABBREVIATIONS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

MONTH_LOOKUP: dict[str, int] = {
    **{name.lower(): index for index, name in enumerate(MONTH_NAMES, start=1)},
    **_MONTH_ABBREVIATIONS,
}
WEEKDAY_LOOKUP: dict[str, int] = {
    name.lower(): index for index, name in enumerate(WEEKDAY_NAMES)
}


def _alternation(words: list[str]) -> str:
    return "|".join(sorted(words, key=len, reverse=True))


_WEEKDAY = rf"(?P<weekday>{_alternation(list(WEEKDAY_LOOKUP))})"
_MONTH = rf"(?P<month>{_alternation(list(MONTH_LOOKUP))})"
_DAY = r"(?P<day>\d{1,2})(?:st|nd|rd|th)?"

WEEKDAY_FIRST_PATTERN = re.compile(
    rf"\b{_WEEKDAY}\b,?\s+{_MONTH}\b\.?\s*{_DAY}\b", re.IGNORECASE
)
MONTH_FIRST_PATTERN = re.compile(
    rf"\b{_MONTH}\b\.?\s*{_DAY}\b,?\s+{_WEEKDAY}\b", re.IGNORECASE
)
_RANGE_JOINER = r"(?:&|-|–|—|\band\b|\bthrough\b|\bto\b)"
DAY_RANGE_PATTERN = re.compile(
    rf"\b(?P<first>{_alternation(list(WEEKDAY_LOOKUP))})\b\s*{_RANGE_JOINER}\s*"
    rf"{_WEEKDAY}\b,?\s+{_MONTH}\b\.?\s*{_DAY}\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DateMention:
    """A weekday + month + day phrase found in the text."""

    text: str
    start: int
    end: int
    weekday_start: int  # offsets of the weekday within ``text``
    weekday_end: int
    weekday: int  # 0 = Monday
    month: int
    day: int
    is_range: bool = False

    @classmethod
    def from_match(cls, match: re.Match[str], *, is_range: bool = False) -> "DateMention":
        offset = match.start()
        return cls(
            text=match.group(0),
            start=match.start(),
            end=match.end(),
            weekday_start=match.start("weekday") - offset,
            weekday_end=match.end("weekday") - offset,
            weekday=WEEKDAY_LOOKUP[match.group("weekday").lower()],
            month=MONTH_LOOKUP[match.group("month").lower()],
            day=int(match.group("day")),
            is_range=is_range,
        )

    def with_weekday(self, weekday: int) -> str:
        """Return the phrase with its weekday replaced by ``weekday``."""
        return (
            self.text[: self.weekday_start]
            + WEEKDAY_NAMES[weekday]
            + self.text[self.weekday_end :]
        )


def find_date_mentions(text: str) -> list[DateMention]:
    """Return all weekday/date mentions in reading order, ranges included."""
    mentions: list[DateMention] = []
    claimed: list[tuple[int, int]] = []

    def _free(match: re.Match[str]) -> bool:
        start, end = match.span()
        return not any(start < c_end and c_start < end for c_start, c_end in claimed)

    for match in DAY_RANGE_PATTERN.finditer(text):
        mentions.append(DateMention.from_match(match, is_range=True))
        claimed.append(match.span())

    for pattern in (WEEKDAY_FIRST_PATTERN, MONTH_FIRST_PATTERN):
        for match in pattern.finditer(text):
            if not _free(match):
                continue
            mentions.append(DateMention.from_match(match))
            claimed.append(match.span())

    mentions.sort(key=lambda mention: mention.start)
    return mentions


def _date_or_none(year: int, month: int, day: int) -> datetime.date | None:
    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


class DateValidator:
    """Checks stated weekdays against a year or year range."""

    def validate(self, text: str, years: DateContext) -> list[ErrorRecord]:
        records: list[ErrorRecord] = []
        seen: set[tuple[int, int, int]] = set()

        for mention in find_date_mentions(text):
            if mention.is_range:
                LOGGER.debug("Skipping multi-day mention %r", mention.text)
                continue
            key = (mention.weekday, mention.month, mention.day)
            if key in seen:
                continue
            record = self._check_mention(mention, years)
            if record is not None:
                seen.add(key)
                records.append(record)
        return records

    def _check_mention(self, mention: DateMention, years: DateContext) -> ErrorRecord | None:
        dates = [
            found
            for found in (_date_or_none(year, mention.month, mention.day) for year in years.years)
            if found is not None
        ]
        month_name = MONTH_NAMES[mention.month - 1]
        stated = WEEKDAY_NAMES[mention.weekday]
        error_text = mention.with_weekday(mention.weekday)

        if not dates:
            return ErrorRecord(
                location=DATE_LOCATION,
                error_text=error_text,
                correction_text=f"{month_name} {mention.day} does not exist",
                kind=ErrorKind.DATE,
                explanation=(
                    f"{month_name} {mention.day} is not a valid date in {years.describe()}."
                ),
                rule_id="DATE_WEEKDAY",
            )

        if any(found.weekday() == mention.weekday for found in dates):
            return None

        # The start year is the reference; fall back to the first year in
        # which the date exists (February 29).
        reference = dates[0]
        actual = WEEKDAY_NAMES[reference.weekday()]
        if years.start == years.end:
            explanation = (
                f"{month_name} {mention.day}, {reference.year} is a {actual}, not a {stated}."
            )
        else:
            explanation = (
                f"{month_name} {mention.day} is not a {stated} in any year from "
                f"{years.start} to {years.end}; in {reference.year} it is a {actual}."
            )
        return ErrorRecord(
            location=DATE_LOCATION,
            error_text=error_text,
            correction_text=mention.with_weekday(reference.weekday()),
            kind=ErrorKind.DATE,
            explanation=explanation,
            rule_id="DATE_WEEKDAY",
        )


_DEFAULT_VALIDATOR = DateValidator()


def validate(text: str, years: DateContext) -> list[ErrorRecord]:
    """Return one record per distinct weekday/date mismatch in ``text``."""
    return _DEFAULT_VALIDATOR.validate(text, years)
