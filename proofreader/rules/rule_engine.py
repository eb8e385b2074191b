"""Run every deterministic checker over a document.

The engine owns no per-run state: each call builds its own record list, so a
single instance can be shared between concurrent runs.
"""

from __future__ import annotations

import logging

from proofreader.models import DateContext, ErrorRecord, StyleSubstitutionMode

from .accent_checker import AccentChecker
from .capitalization import CapitalizationChecker
from .date_validator import DateValidator
from .style_checker import StyleChecker

LOGGER = logging.getLogger(__name__)


class RuleEngine:
    """Date, capitalization, accent and style checks in one call."""

    def __init__(
        self,
        *,
        style_mode: StyleSubstitutionMode = StyleSubstitutionMode.ONCE_PER_DOCUMENT,
        date_validator: DateValidator | None = None,
        capitalization: CapitalizationChecker | None = None,
        accents: AccentChecker | None = None,
        style: StyleChecker | None = None,
    ) -> None:
        self.date_validator = date_validator or DateValidator()
        self.capitalization = capitalization or CapitalizationChecker()
        self.accents = accents or AccentChecker()
        self.style = style or StyleChecker(mode=style_mode)

    def check(self, text: str, years: DateContext) -> list[ErrorRecord]:
        """Return the rule findings for ``text`` grouped by checker."""
        date_errors = self.date_validator.validate(text, years)
        capitalization_errors = self.capitalization.check(text)
        accent_errors = self.accents.check(text)
        style_errors = self.style.check(text)

        LOGGER.info(
            "Rule checks found %d date, %d capitalization, %d accent and %d style issue(s)",
            len(date_errors),
            len(capitalization_errors),
            len(accent_errors),
            len(style_errors),
        )
        return [*date_errors, *capitalization_errors, *accent_errors, *style_errors]


def run_rule_checks(
    text: str,
    years: DateContext,
    *,
    style_mode: StyleSubstitutionMode = StyleSubstitutionMode.ONCE_PER_DOCUMENT,
) -> list[ErrorRecord]:
    """Convenience wrapper building a :class:`RuleEngine` for one call."""
    return RuleEngine(style_mode=style_mode).check(text, years)
