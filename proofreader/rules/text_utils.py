"""Text helpers shared by the rule checkers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Sequence

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .definitions import RuleDefinition

CONTEXT_WIDTH = 10

# Tokens that look like addresses are never style-checked.
_ADDRESS_MARKERS = ("@", "://", "www.")


@dataclass
class RuleMatch:
    """One rule hit inside one line of the document."""

    rule: "RuleDefinition"
    match: re.Match[str]
    line_index: int  # 0-based
    line: str

    @property
    def line_number(self) -> int:
        return self.line_index + 1


def phrase_pattern(phrase: str) -> str:
    """Return a regex source matching ``phrase`` with flexible inner spacing."""
    return r"\s+".join(re.escape(word) for word in phrase.split())


def mirror_case(source: str, target: str) -> str:
    """Copy the capitalization pattern of ``source`` onto ``target``."""
    letters = [ch for ch in source if ch.isalpha()]
    if len(letters) > 1 and all(ch.isupper() for ch in letters):
        return target.upper()
    if source[:1].isupper():
        return target[:1].upper() + target[1:]
    return target


def highlight_context(line: str, start: int, end: int, width: int = CONTEXT_WIDTH) -> str:
    """Return the match with ``width`` characters either side, match in ``**``."""
    before = line[max(0, start - width) : start]
    after = line[end : end + width]
    return f"{before}**{line[start:end]}**{after}".strip()


def is_inside_address(line: str, start: int, end: int) -> bool:
    """True when the span belongs to an email address or URL token."""
    token_start = start
    while token_start > 0 and not line[token_start - 1].isspace():
        token_start -= 1
    token_end = end
    while token_end < len(line) and not line[token_end].isspace():
        token_end += 1
    token = line[token_start:token_end]
    return any(marker in token for marker in _ADDRESS_MARKERS)


def _overlaps(span: tuple[int, int], claimed: list[tuple[int, int]]) -> bool:
    start, end = span
    return any(start < c_end and c_start < end for c_start, c_end in claimed)


def iter_rule_matches(text: str, rules: Sequence["RuleDefinition"]) -> Iterator[RuleMatch]:
    """Yield non-overlapping rule matches line by line, in reading order.

    Rules with more words are tried first and claim their spans, so a
    multi-word phrase is never also reported through one of its words.
    """
    ordered = sorted(rules, key=lambda rule: rule.specificity, reverse=True)
    for line_index, line in enumerate(text.split("\n")):
        if not line.strip():
            continue
        claimed: list[tuple[int, int]] = []
        hits: list[RuleMatch] = []
        for rule in ordered:
            for match in rule.regex.finditer(line):
                if _overlaps(match.span(), claimed):
                    continue
                claimed.append(match.span())
                hits.append(RuleMatch(rule, match, line_index, line))
        hits.sort(key=lambda hit: hit.match.start())
        yield from hits
