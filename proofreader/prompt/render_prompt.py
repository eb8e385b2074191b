"""Render prompt templates in proofreader/prompt/promptFiles using pystache.

Templates pull in shared partials (the house style guide and the output
format). Partials may be wrapped in a code fence so they read well as
standalone Markdown; the fence is stripped before rendering.

Usage:
    python -m proofreader.prompt.render_prompt [template_filename] [context.json]

If no arguments are given, it renders ``proofreader.md`` with an empty
context and prints to stdout.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pystache

PROMPTS_DIR = Path(__file__).parent / "promptFiles"

SYSTEM_TEMPLATE = "proofreader.md"
USER_TEMPLATE = "user_proofreader.md"

# Map of template to required partials
TEMPLATE_PARTIALS: dict[str, list[str]] = {
    SYSTEM_TEMPLATE: ["house_style_guide", "output_format"],
    USER_TEMPLATE: [],
}


def _read_prompt(name: str) -> str:
    p = PROMPTS_DIR / name
    if not p.exists():
        raise FileNotFoundError(f"Prompt file not found: {p}")
    return p.read_text(encoding="utf-8")


def _strip_code_fences(s: str) -> str:
    """Strip a single leading and trailing code-fence block if present."""
    lines = s.splitlines()
    if not lines:
        return s
    first = lines[0].lstrip()
    last = lines[-1].lstrip()
    if first.startswith("```"):
        lines = lines[1:]
    if last.startswith("```"):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def _load_partials(template_names: list[str]) -> dict[str, str]:
    partial_names: set[str] = set()
    for name in template_names:
        partial_names.update(TEMPLATE_PARTIALS.get(name, []))
    return {
        partial_name: _strip_code_fences(_read_prompt(f"{partial_name}.md"))
        for partial_name in sorted(partial_names)
    }


def render_template(template_name: str = SYSTEM_TEMPLATE, context: dict | None = None) -> str:
    template = _read_prompt(template_name)
    renderer = pystache.Renderer(partials=_load_partials([template_name]))
    return renderer.render(template, context or {})


def render_prompts(
    system_template: str = SYSTEM_TEMPLATE,
    user_template: str = USER_TEMPLATE,
    context: dict | None = None,
) -> tuple[str, str]:
    """Render the instruction and document halves of a prompt.

    Returns:
        (system_prompt, user_prompt)
    """
    renderer = pystache.Renderer(partials=_load_partials([system_template, user_template]))

    system_tpl = _read_prompt(system_template)
    user_tpl = _read_prompt(user_template)

    rendered_system = renderer.render(system_tpl, context or {})
    rendered_user = renderer.render(user_tpl, context or {})
    return rendered_system.strip(), rendered_user.strip()


def _load_context(path: str) -> dict:
    return json.loads(Path(path).read_text(encoding="utf-8"))


if __name__ == "__main__":
    tpl = sys.argv[1] if len(sys.argv) > 1 else SYSTEM_TEMPLATE
    ctx = None
    if len(sys.argv) > 2:
        ctx = _load_context(sys.argv[2])
    print(render_template(tpl, ctx))
