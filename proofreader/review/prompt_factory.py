"""Build the single prompt string sent to the model.

The relay accepts one ``text`` field, so the rendered instruction half and
the document half are joined into one message. The timestamped end marker
makes every request body unique.
"""

from __future__ import annotations

from datetime import datetime, timezone

from proofreader.models import ProofreadContext
from proofreader.prompt.render_prompt import render_prompts


def build_prompt_context(
    text: str,
    context: ProofreadContext,
    *,
    timestamp: datetime | None = None,
) -> dict[str, str]:
    """Return the mustache context for the prompt templates."""
    moment = timestamp or datetime.now(timezone.utc)
    return {
        "document_type": context.project.document_type,
        "notes": context.project.notes,
        "years_description": context.date_years.describe(),
        "text": text,
        "timestamp": moment.isoformat(),
    }


def build_prompts(
    text: str,
    context: ProofreadContext,
    *,
    timestamp: datetime | None = None,
) -> list[str]:
    """Return ``[instructions, document]`` for a run."""
    system_prompt, user_prompt = render_prompts(
        context=build_prompt_context(text, context, timestamp=timestamp)
    )
    return [system_prompt, user_prompt]


def build_prompt(
    text: str,
    context: ProofreadContext,
    *,
    timestamp: datetime | None = None,
) -> str:
    return "\n\n".join(build_prompts(text, context, timestamp=timestamp))
