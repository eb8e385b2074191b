"""Brand-term capitalization checks.

Each lowercase occurrence of a protected term (``member``, ``team member``,
``guest`` ...) is reported with its 1-based line number. Address-like tokens
such as ``membership@club.com`` are left alone.
"""

from __future__ import annotations

import logging
from typing import Sequence

from proofreader.models import ErrorRecord
from proofreader.utils.page_utils import build_line_page_map

from .definitions import RuleDefinition
from .rules_config import BRAND_TERMS
from .text_utils import highlight_context, is_inside_address, iter_rule_matches

LOGGER = logging.getLogger(__name__)


def _needs_capital(matched: str) -> bool:
    return any(word[:1].islower() for word in matched.split())


class CapitalizationChecker:
    """Flags brand-protected terms that are not capitalized."""

    def __init__(self, rules: Sequence[RuleDefinition] = BRAND_TERMS) -> None:
        self._rules = tuple(rules)

    def check(self, text: str) -> list[ErrorRecord]:
        page_map = build_line_page_map(text)
        records: list[ErrorRecord] = []
        for hit in iter_rule_matches(text, self._rules):
            matched = hit.match.group(0)
            if not _needs_capital(matched):
                continue
            start, end = hit.match.span()
            if is_inside_address(hit.line, start, end):
                LOGGER.debug("Skipping %r inside an address on line %d", matched, hit.line_number)
                continue
            correction = hit.rule.render_correction(hit.match)
            records.append(
                ErrorRecord(
                    location=f"Line {hit.line_number}",
                    error_text=matched,
                    correction_text=correction,
                    kind=hit.rule.kind,
                    explanation=f'Brand style: "{correction}" is always capitalized.',
                    context=highlight_context(hit.line, start, end),
                    page_number=page_map.get(hit.line_index),
                    rule_id=hit.rule.rule_id,
                )
            )
        return records


_DEFAULT_CHECKER = CapitalizationChecker()


def check(text: str) -> list[ErrorRecord]:
    """Run the default brand-term rules over ``text``."""
    return _DEFAULT_CHECKER.check(text)
