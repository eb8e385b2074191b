"""Tests for prompt template rendering with pystache."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofreader.models import DateContext, ProjectMetadata, ProofreadContext
from proofreader.prompt.render_prompt import (
    _read_prompt,
    _strip_code_fences,
    render_prompts,
    render_template,
)
from proofreader.review.prompt_factory import build_prompt, build_prompt_context, build_prompts

FIXED_TIME = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _context(notes: str = "") -> ProofreadContext:
    return ProofreadContext(
        date_years=DateContext.parse("2025-2026"),
        project=ProjectMetadata(document_type="Newsletter", notes=notes),
    )


class TestStripCodeFences:
    """Tests for _strip_code_fences helper."""

    def test_strip_triple_backticks(self) -> None:
        assert _strip_code_fences("```\nHello world\n```") == "Hello world"

    def test_strip_with_language_tag(self) -> None:
        """Test stripping fences with language tag (e.g. ```markdown)."""
        assert _strip_code_fences("```markdown\nHello world\n```") == "Hello world"

    def test_no_fences(self) -> None:
        assert _strip_code_fences("Hello world") == "Hello world"

    def test_only_opening_fence(self) -> None:
        assert _strip_code_fences("```\nHello world") == "Hello world"

    def test_empty_string(self) -> None:
        assert _strip_code_fences("") == ""


class TestReadPrompt:
    """Tests for _read_prompt helper."""

    def test_read_system_prompt(self) -> None:
        content = _read_prompt("proofreader.md")
        assert "{{> house_style_guide}}" in content
        assert "{{> output_format}}" in content

    def test_read_nonexistent_prompt(self) -> None:
        with pytest.raises(FileNotFoundError, match="nonexistent_prompt.md"):
            _read_prompt("nonexistent_prompt.md")


class TestRenderTemplate:
    """Tests for render_template and render_prompts."""

    def test_partials_are_inlined_without_fences(self) -> None:
        result = render_template("proofreader.md", {"years_description": "2025"})

        assert "CAPITALIZATION RULES" in result
        assert "OUTPUT FORMAT" in result
        assert "```" not in result
        assert "in 2025" in result

    def test_render_idempotent(self) -> None:
        assert render_template("proofreader.md") == render_template("proofreader.md")

    def test_text_is_not_html_escaped(self) -> None:
        _, user_text = render_prompts(
            context={
                "document_type": "Menu & Wine List",
                "years_description": "2025",
                "text": 'Fish <b>"special"</b> & chips',
                "timestamp": "t",
            }
        )

        assert "DOCUMENT TYPE: Menu & Wine List" in user_text
        assert 'Fish <b>"special"</b> & chips' in user_text

    def test_notes_section_only_when_present(self) -> None:
        base = {"document_type": "Flyer", "years_description": "2025", "text": "Hi", "timestamp": "t"}

        _, without_notes = render_prompts(context={**base, "notes": ""})
        _, with_notes = render_prompts(context={**base, "notes": "Spring event"})

        assert "NOTES FROM THE AUTHOR" not in without_notes
        assert "NOTES FROM THE AUTHOR: Spring event" in with_notes


class TestPromptFactory:
    """Tests for the prompt assembled for a proofreading run."""

    def test_prompt_context(self) -> None:
        context = build_prompt_context("Body", _context("Bring a hat"), timestamp=FIXED_TIME)

        assert context == {
            "document_type": "Newsletter",
            "notes": "Bring a hat",
            "years_description": "2025-2026",
            "text": "Body",
            "timestamp": "2025-03-01T12:00:00+00:00",
        }

    def test_build_prompts_returns_both_halves(self) -> None:
        system_text, user_text = build_prompts(
            "Our member club has a great staff.", _context(), timestamp=FIXED_TIME
        )

        assert "professional proofreader" in system_text
        assert "2025-2026" in system_text
        assert "Our member club has a great staff." in user_text
        assert user_text.endswith("=== END OF DOCUMENT (Timestamp: 2025-03-01T12:00:00+00:00) ===")

    def test_build_prompt_joins_halves(self) -> None:
        system_text, user_text = build_prompts("Body text", _context(), timestamp=FIXED_TIME)

        prompt = build_prompt("Body text", _context(), timestamp=FIXED_TIME)

        assert prompt == f"{system_text}\n\n{user_text}"

    def test_timestamp_makes_prompts_unique(self) -> None:
        later = datetime(2025, 3, 1, 12, 0, 1, tzinfo=timezone.utc)

        first = build_prompt("Body text", _context(), timestamp=FIXED_TIME)
        second = build_prompt("Body text", _context(), timestamp=later)

        assert first != second
