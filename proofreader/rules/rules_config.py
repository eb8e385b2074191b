"""House style rules, brand terms and the accent lexicon.

This module defines the static rule tables used by the checkers. Everything
here is built once at import time and never mutated.
"""

from __future__ import annotations

from proofreader.models import ErrorKind

from .definitions import LexiconEntry, RuleDefinition, brand_term

# Terms that must always be capitalized. "Team Member" is listed so it wins
# over the single word "Team" on the same span.
BRAND_TERMS: tuple[RuleDefinition, ...] = (
    brand_term("Team Member"),
    brand_term("Membership", plural=False),
    brand_term("Member"),
    brand_term("Guest"),
    brand_term("Neighbor"),
    brand_term("Homeowner"),
    brand_term("Team"),
)


# General workforce wording is replaced wholesale.
WORKFORCE_RULE = RuleDefinition(
    rule_id="STAFF_SUBSTITUTION",
    pattern=r"staff(?:s)?",
    correction="Team Member(s)",
    label='Replace "staff" with "Team Member(s)"',
    kind=ErrorKind.STYLE,
)

STYLE_SUBSTITUTIONS: tuple[RuleDefinition, ...] = (
    RuleDefinition(
        rule_id="EMAIL_SPELLING",
        pattern=r"e-mail",
        correction="email",
        label='Write "email" without a hyphen',
        kind=ErrorKind.STYLE,
        plural=True,
        mirror_case=True,
    ),
    RuleDefinition(
        rule_id="HOLES_HYPHEN",
        pattern=r"(?P<count>\d+)-holes",
        correction=r"\g<count> holes",
        label="No hyphen when holes is used as a standalone noun",
        kind=ErrorKind.STYLE,
    ),
)


# Bare spelling -> accented spelling. Words that are also common English
# words in their bare form (rose, resume) carry a usage context.
ACCENT_LEXICON: tuple[LexiconEntry, ...] = (
    LexiconEntry("cafe", "café", plural=True),
    LexiconEntry("resume", "résumé", context="CV"),
    LexiconEntry("rose", "rosé", context="wine"),
    LexiconEntry("nee", "née"),
    LexiconEntry("fiance", "fiancé", plural=True),
    LexiconEntry("fiancee", "fiancée", plural=True),
    LexiconEntry("remoulade", "rémoulade"),
    LexiconEntry("saute", "sauté"),
    LexiconEntry("sauteed", "sautéed"),
    LexiconEntry("entree", "entrée", plural=True),
    LexiconEntry("puree", "purée"),
    LexiconEntry("souffle", "soufflé", plural=True),
    LexiconEntry("creme brulee", "crème brûlée"),
    LexiconEntry("a la carte", "à la carte"),
    LexiconEntry("jalapeno", "jalapeño", plural=True),
    LexiconEntry("decor", "décor"),
    LexiconEntry("cliche", "cliché", plural=True),
    LexiconEntry("protege", "protégé", plural=True),
    LexiconEntry("facade", "façade", plural=True),
    LexiconEntry("naive", "naïve"),
    LexiconEntry("pina colada", "piña colada", plural=True),
)
