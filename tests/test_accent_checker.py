from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofreader.models import ErrorKind
from proofreader.rules import AccentChecker, LexiconEntry
from proofreader.rules.accent_checker import ACCENT_LOCATION, check


def _pairs(records):
    return [(r.error_text, r.correction_text) for r in records]


def test_bare_words_get_accented_form_in_reading_order() -> None:
    records = check("Visit our cafe for rose and CREME BRULEE.")

    assert _pairs(records) == [
        ("cafe", "café"),
        ("rose", "rosé"),
        ("CREME BRULEE", "CRÈME BRÛLÉE"),
    ]
    assert all(r.location == ACCENT_LOCATION for r in records)
    assert all(r.kind is ErrorKind.ACCENT for r in records)


def test_capitalization_is_mirrored() -> None:
    assert _pairs(check("Cafe opens at noon.")) == [("Cafe", "Café")]
    assert _pairs(check("Remoulade on the side.")) == [("Remoulade", "Rémoulade")]


def test_plural_entries() -> None:
    assert _pairs(check("Three entrees and two souffles.")) == [
        ("entrees", "entrées"),
        ("souffles", "soufflés"),
    ]


def test_multi_word_entry() -> None:
    assert _pairs(check("Dinner is served a la carte.")) == [("a la carte", "à la carte")]


def test_already_accented_words_are_ignored() -> None:
    assert check("The café serves rosé and crème brûlée.") == []


def test_explanation_includes_usage_context() -> None:
    records = check("A glass of rose.")

    assert records[0].explanation == 'Use the accented spelling "rosé" (wine).'


def test_each_occurrence_is_reported() -> None:
    records = check("cafe\ncafe")

    assert len(records) == 2


def test_custom_lexicon() -> None:
    checker = AccentChecker([LexiconEntry("ole", "olé")])

    records = checker.check("Ole! said the cafe owner.")

    assert _pairs(records) == [("Ole", "Olé")]
