"""Data types describing the deterministic proofreading rules.

Rules are plain data: a whole-word pattern, a correction template and a
label. The checkers iterate them generically, so a new brand term or banned
word is a one-line addition to :mod:`proofreader.rules.rules_config`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from proofreader.models import ErrorKind

from .text_utils import mirror_case, phrase_pattern


@dataclass(frozen=True)
class RuleDefinition:
    """A case-insensitive whole-word rule.

    ``correction`` is expanded with :meth:`re.Match.expand`, so templates may
    refer to named groups of ``pattern`` (``\\g<count> holes``). When
    ``plural`` is set a trailing ``s`` is accepted and carried over to the
    correction.
    """

    rule_id: str
    pattern: str
    correction: str
    label: str
    kind: ErrorKind
    plural: bool = False
    mirror_case: bool = False
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        suffix = r"(?P<suffix>s)?" if self.plural else ""
        compiled = re.compile(
            rf"\b(?P<term>{self.pattern}){suffix}\b", re.IGNORECASE
        )
        object.__setattr__(self, "regex", compiled)

    @property
    def specificity(self) -> int:
        """Number of words in the pattern; longer phrases are matched first."""
        return self.pattern.count(r"\s+") + 1

    def render_correction(self, match: re.Match[str]) -> str:
        correction = match.expand(self.correction)
        if self.plural and match.group("suffix"):
            correction += match.group("suffix").lower()
        if self.mirror_case:
            correction = mirror_case(match.group(0), correction)
        return correction


@dataclass(frozen=True)
class LexiconEntry:
    """A bare word and the accented spelling it must be replaced with."""

    word: str
    accented: str
    context: str | None = None
    plural: bool = False

    def to_rule(self) -> RuleDefinition:
        label = f"{self.accented} ({self.context})" if self.context else self.accented
        return RuleDefinition(
            rule_id="ACCENT_LEXICON",
            pattern=phrase_pattern(self.word),
            correction=self.accented,
            label=label,
            kind=ErrorKind.ACCENT,
            plural=self.plural,
            mirror_case=True,
        )


def brand_term(term: str, *, plural: bool = True) -> RuleDefinition:
    """Build a capitalization rule whose correction is ``term`` as written."""
    return RuleDefinition(
        rule_id="BRAND_CAPITALIZATION",
        pattern=phrase_pattern(term),
        correction=term,
        label=f'Always capitalize "{term}"',
        kind=ErrorKind.CAPITALIZATION,
        plural=plural,
    )
