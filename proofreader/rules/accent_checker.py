"""Accent/lexicon checks for words that require diacritics."""

from __future__ import annotations

from typing import Sequence

from proofreader.models import ErrorRecord
from proofreader.utils.page_utils import build_line_page_map

from .definitions import LexiconEntry
from .rules_config import ACCENT_LEXICON
from .text_utils import highlight_context, iter_rule_matches

ACCENT_LOCATION = "Accent check"


class AccentChecker:
    """Reports every bare spelling of a lexicon word, occurrence by occurrence."""

    def __init__(self, lexicon: Sequence[LexiconEntry] = ACCENT_LEXICON) -> None:
        self._entries = {entry.accented: entry for entry in lexicon}
        self._rules = tuple(entry.to_rule() for entry in lexicon)

    def check(self, text: str) -> list[ErrorRecord]:
        page_map = build_line_page_map(text)
        records: list[ErrorRecord] = []
        for hit in iter_rule_matches(text, self._rules):
            entry = self._entries[hit.rule.correction]
            explanation = f'Use the accented spelling "{entry.accented}"'
            if entry.context:
                explanation += f" ({entry.context})"
            start, end = hit.match.span()
            records.append(
                ErrorRecord(
                    location=ACCENT_LOCATION,
                    error_text=hit.match.group(0),
                    correction_text=hit.rule.render_correction(hit.match),
                    kind=hit.rule.kind,
                    explanation=explanation + ".",
                    context=highlight_context(hit.line, start, end),
                    page_number=page_map.get(hit.line_index),
                    rule_id=hit.rule.rule_id,
                )
            )
        return records


_DEFAULT_CHECKER = AccentChecker()


def check(text: str) -> list[ErrorRecord]:
    """Run the default accent lexicon over ``text``."""
    return _DEFAULT_CHECKER.check(text)
