"""Deterministic rule checkers.

Import from ``proofreader.rules`` rather than the individual modules.
"""

from __future__ import annotations

from .accent_checker import AccentChecker
from .capitalization import CapitalizationChecker
from .date_validator import DateValidator, find_date_mentions
from .definitions import LexiconEntry, RuleDefinition
from .rule_engine import RuleEngine, run_rule_checks
from .rules_config import ACCENT_LEXICON, BRAND_TERMS, STYLE_SUBSTITUTIONS, WORKFORCE_RULE
from .style_checker import StyleChecker

__all__ = [
    "ACCENT_LEXICON",
    "BRAND_TERMS",
    "STYLE_SUBSTITUTIONS",
    "WORKFORCE_RULE",
    "AccentChecker",
    "CapitalizationChecker",
    "DateValidator",
    "LexiconEntry",
    "RuleDefinition",
    "RuleEngine",
    "StyleChecker",
    "find_date_mentions",
    "run_rule_checks",
]
