"""Banned-term substitutions.

The workforce rule ("staff") is a terminology substitution, so by default it
is reported once per document under a fixed location. The remaining
substitutions are reported per occurrence with their line number.
"""

from __future__ import annotations

import logging
from typing import Sequence

from proofreader.models import ErrorRecord, StyleSubstitutionMode
from proofreader.utils.page_utils import build_line_page_map

from .definitions import RuleDefinition
from .rules_config import STYLE_SUBSTITUTIONS, WORKFORCE_RULE
from .text_utils import highlight_context, is_inside_address, iter_rule_matches

LOGGER = logging.getLogger(__name__)

STYLE_LOCATION = "Style check"


class StyleChecker:
    """Flags terms that house style replaces wholesale."""

    def __init__(
        self,
        *,
        mode: StyleSubstitutionMode = StyleSubstitutionMode.ONCE_PER_DOCUMENT,
        workforce_rule: RuleDefinition = WORKFORCE_RULE,
        substitutions: Sequence[RuleDefinition] = STYLE_SUBSTITUTIONS,
    ) -> None:
        self.mode = StyleSubstitutionMode(mode)
        self._workforce_rule = workforce_rule
        self._substitutions = tuple(substitutions)

    def check(self, text: str) -> list[ErrorRecord]:
        page_map = build_line_page_map(text)
        once = self.mode is StyleSubstitutionMode.ONCE_PER_DOCUMENT
        workforce_reported = False
        records: list[ErrorRecord] = []

        rules = (self._workforce_rule, *self._substitutions)
        for hit in iter_rule_matches(text, rules):
            start, end = hit.match.span()
            if is_inside_address(hit.line, start, end):
                LOGGER.debug(
                    "Skipping %r inside an address on line %d", hit.match.group(0), hit.line_number
                )
                continue
            is_workforce = hit.rule is self._workforce_rule
            if is_workforce and once:
                if workforce_reported:
                    continue
                workforce_reported = True
                location = STYLE_LOCATION
                page_number = None
            else:
                location = f"Line {hit.line_number}"
                page_number = page_map.get(hit.line_index)

            records.append(
                ErrorRecord(
                    location=location,
                    error_text=hit.match.group(0),
                    correction_text=hit.rule.render_correction(hit.match),
                    kind=hit.rule.kind,
                    explanation=hit.rule.label,
                    context=highlight_context(hit.line, start, end),
                    page_number=page_number,
                    rule_id=hit.rule.rule_id,
                )
            )
        return records


_DEFAULT_CHECKER = StyleChecker()


def check(text: str) -> list[ErrorRecord]:
    """Run the default substitutions over ``text`` (workforce rule once per document)."""
    return _DEFAULT_CHECKER.check(text)
