"""Tests for the tolerant model response parser."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofreader.models import ErrorKind
from proofreader.parsing import ResponseParser, parse, parse_response
from proofreader.parsing.response_parser import (
    parse_arrow,
    parse_change_to,
    parse_should_be,
    parse_should_be_with_explanation,
)


def test_should_be_with_explanation() -> None:
    records = parse('- Page 2 > "resume" should be "résumé" | EXPLAIN: spelling')

    assert len(records) == 1
    record = records[0]
    assert record.location == "Page 2"
    assert record.error_text == "resume"
    assert record.correction_text == "résumé"
    assert record.explanation == "spelling"
    assert record.page_number == 2
    assert record.kind is ErrorKind.MODEL_DERIVED
    assert record.rule_id == "MODEL"


@pytest.mark.parametrize("response", ["No errors found.", "No errors found", "  no ERRORS found!  ", "- No errors found."])
def test_no_errors_marker(response: str) -> None:
    summary = parse_response(response)

    assert summary.records == []
    assert summary.skipped == 0
    assert summary.no_errors


def test_no_errors_marker_wins_over_bullets() -> None:
    response = 'No errors found.\n- Page 1 > "teh" should be "the"'

    summary = parse_response(response)

    assert summary.records == []
    assert summary.bullet_lines == 0
    assert summary.no_errors


def test_every_grammar_one_line_becomes_a_record() -> None:
    response = "\n".join(
        [
            "Here is what I found:",
            '- Page 1 > "member" should be "Member" | EXPLAIN: brand term',
            '- Hours Section > "18-holes" should be "18 holes" | EXPLAIN: no hyphen',
            '- Wine List > "Rose" should be "Rosé" | EXPLAIN: missing accent',
        ]
    )

    summary = parse_response(response)

    assert summary.bullet_lines == 3
    assert len(summary.records) == 3
    for record in summary.records:
        assert record.location
        assert record.error_text
        assert record.correction_text
        assert record.explanation


def test_should_be_without_explanation() -> None:
    records = parse('- Line 3 > "teh" should be "the"')

    assert [(r.location, r.error_text, r.correction_text, r.explanation) for r in records] == [
        ("Line 3", "teh", "the", None)
    ]


def test_arrow_format_uses_prefix_as_explanation() -> None:
    records = parse('- Wine List > Add accent: "Rose" → "Rosé"')

    assert len(records) == 1
    assert records[0].location == "Wine List"
    assert records[0].error_text == "Rose"
    assert records[0].correction_text == "Rosé"
    assert records[0].explanation == "Add accent"


def test_ascii_arrow_format() -> None:
    records = parse('- Page 2, Paragraph 3 > Capitalize "member" -> "Member"')

    assert records[0].location == "Page 2, Paragraph 3"
    assert records[0].page_number == 2
    assert records[0].explanation == "Capitalize"


def test_change_to_format() -> None:
    records = parse('- Hours > Change "18-holes" to "18 holes"')

    assert [(r.location, r.error_text, r.correction_text) for r in records] == [
        ("Hours", "18-holes", "18 holes")
    ]


def test_missing_location_gets_issue_number() -> None:
    records = parse('- "teh" should be "the"\n- "adn" should be "and"')

    assert [r.location for r in records] == ["Issue 1", "Issue 2"]
    assert all(r.page_number is None for r in records)


def test_arrow_inside_location_is_not_the_delimiter() -> None:
    records = parse('- Menu -> Desserts > "creme" should be "crème"')

    assert records[0].location == "Menu -> Desserts"
    assert records[0].error_text == "creme"


def test_explanation_text_never_leaks_into_correction() -> None:
    records = parse('- Page 1 > "a" should be "b" | EXPLAIN: prefer "b" → over "a" here')

    assert records[0].correction_text == "b"
    assert records[0].explanation == 'prefer "b" → over "a" here'


def test_curly_quotes_are_accepted() -> None:
    records = parse("- Page 4 > “neighbor” should be “Neighbor”")

    assert records[0].error_text == "neighbor"
    assert records[0].correction_text == "Neighbor"


def test_apostrophes_at_field_edges_are_kept() -> None:
    records = parse(
        "\n".join(
            [
                '- Page 1 > "til" should be "\'til"',
                '- Page 1 > "Members" should be "Members\'" | EXPLAIN: possessive',
            ]
        )
    )

    assert [(r.error_text, r.correction_text) for r in records] == [
        ("til", "'til"),
        ("Members", "Members'"),
    ]


def test_single_quoted_plain_fields_lose_their_enclosing_pair() -> None:
    records = parse("- Line 2 > 'teh' should be 'the'")

    assert [(r.error_text, r.correction_text) for r in records] == [("teh", "the")]


def test_extra_location_delimiters_stay_in_the_fields() -> None:
    records = parse('- Page 1 > "a > b" should be "a >= b" | EXPLAIN: x > y')

    assert [(r.location, r.error_text, r.correction_text, r.explanation) for r in records] == [
        ("Page 1", "a > b", "a >= b", "x > y")
    ]


def test_unparsable_bullets_are_counted_not_fatal() -> None:
    response = "\n".join(
        [
            "- This line says nothing useful",
            '- Page 1 > "teh" should be "the"',
            "Trailing commentary without a bullet.",
        ]
    )

    summary = parse_response(response)

    assert summary.bullet_lines == 2
    assert summary.skipped == 1
    assert summary.skipped_lines == ["- This line says nothing useful"]
    assert len(summary.records) == 1


def test_empty_response() -> None:
    summary = parse_response("")

    assert summary.records == []
    assert summary.bullet_lines == 0
    assert not summary.no_errors


def test_grammars_return_none_when_they_do_not_apply() -> None:
    assert parse_should_be_with_explanation('P > "a" should be "b"', None) is None
    assert parse_should_be('P > "a" should be "b"', "why") is None
    assert parse_arrow('P > "a" should be "b"', None) is None
    assert parse_change_to('P > "a" should be "b"', None) is None


def test_custom_grammar_order() -> None:
    parser = ResponseParser(grammars=[parse_change_to])

    summary = parser.parse_response('- P > "a" should be "b"\n- P > Change "c" to "d"')

    assert [(r.error_text, r.correction_text) for r in summary.records] == [("c", "d")]
    assert summary.skipped == 1
