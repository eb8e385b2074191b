from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofreader.models import DateContext, ErrorKind, StyleSubstitutionMode
from proofreader.rules import RuleEngine, run_rule_checks

YEAR_2025 = DateContext.single(2025)


def test_member_and_staff_example() -> None:
    records = run_rule_checks("Our member club has a great staff.", YEAR_2025)

    assert [(r.kind, r.error_text, r.correction_text) for r in records] == [
        (ErrorKind.CAPITALIZATION, "member", "Member"),
        (ErrorKind.STYLE, "staff", "Team Member(s)"),
    ]


def test_records_are_grouped_by_checker() -> None:
    text = "The staff cafe opens Monday, December 31 for every guest."

    records = RuleEngine().check(text, YEAR_2025)

    assert [r.kind for r in records] == [
        ErrorKind.DATE,
        ErrorKind.CAPITALIZATION,
        ErrorKind.ACCENT,
        ErrorKind.STYLE,
    ]


def test_clean_text_has_no_findings() -> None:
    text = "Welcome, Members and Guests. The café opens Wednesday, December 31."

    assert run_rule_checks(text, YEAR_2025) == []


def test_style_mode_is_forwarded() -> None:
    text = "The staff are here.\nMore staff tomorrow."

    once = run_rule_checks(text, YEAR_2025)
    every = run_rule_checks(text, YEAR_2025, style_mode=StyleSubstitutionMode.PER_OCCURRENCE)

    assert len(once) == 1
    assert len(every) == 2


def test_engine_can_be_reused() -> None:
    engine = RuleEngine()

    first = engine.check("A member.", YEAR_2025)
    second = engine.check("A member.", YEAR_2025)

    assert first == second
    assert len(first) == 1
