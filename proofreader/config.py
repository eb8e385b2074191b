"""Runtime settings read from the environment (and an optional ``.env`` file).

Explicit environment variables win over ``.env`` values unless the caller
asks otherwise; keyword overrides passed to :func:`load_configuration` win
over both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from proofreader.models import StyleSubstitutionMode

LOGGER = logging.getLogger(__name__)

DEFAULT_RELAY_URL = "http://localhost:8888/.netlify/functions/proofread"
DEFAULT_ANTHROPIC_URL = "https://api.anthropic.com"
DEFAULT_MODEL = "claude-3-haiku-20240307"
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_MIN_TEXT_LENGTH = 5
DEFAULT_PRIMARY_PROVIDER = "relay"

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class ProofreaderConfiguration:
    """Settings shared by the orchestrator, providers and CLI."""

    api_key: str | None = field(default=None, repr=False)
    relay_url: str = DEFAULT_RELAY_URL
    anthropic_url: str = DEFAULT_ANTHROPIC_URL
    model: str = DEFAULT_MODEL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    min_text_length: int = DEFAULT_MIN_TEXT_LENGTH
    style_mode: StyleSubstitutionMode = StyleSubstitutionMode.ONCE_PER_DOCUMENT
    degrade_on_malformed: bool = True
    primary_provider: str = DEFAULT_PRIMARY_PROVIDER
    fallback_providers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.min_text_length < 1:
            raise ValueError("min_text_length must be at least 1")

    def with_overrides(self, **overrides: Any) -> "ProofreaderConfiguration":
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def _read_float_env(var_name: str, *, default: float) -> float:
    raw = os.environ.get(var_name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r: not a number; using %s", var_name, raw, default)
        return default
    if value <= 0:
        LOGGER.warning("Ignoring %s=%r: must be positive; using %s", var_name, raw, default)
        return default
    return value


def _read_int_env(var_name: str, *, default: int) -> int:
    raw = os.environ.get(var_name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r: not an integer; using %s", var_name, raw, default)
        return default
    if value < 1:
        LOGGER.warning("Ignoring %s=%r: must be at least 1; using %s", var_name, raw, default)
        return default
    return value


def _read_bool_env(var_name: str, *, default: bool) -> bool:
    raw = os.environ.get(var_name)
    if raw is None or not raw.strip():
        return default
    flag = raw.strip().lower()
    if flag in _TRUE_VALUES:
        return True
    if flag in _FALSE_VALUES:
        return False
    LOGGER.warning("Ignoring %s=%r: expected true/false; using %s", var_name, raw, default)
    return default


def _read_style_mode(var_name: str) -> StyleSubstitutionMode:
    raw = os.environ.get(var_name)
    default = StyleSubstitutionMode.ONCE_PER_DOCUMENT
    if raw is None or not raw.strip():
        return default
    try:
        return StyleSubstitutionMode(raw.strip().lower())
    except ValueError:
        LOGGER.warning(
            "Ignoring %s=%r: expected one of %s; using %s",
            var_name,
            raw,
            ", ".join(mode.value for mode in StyleSubstitutionMode),
            default.value,
        )
        return default


def _split_names(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(chunk.strip().lower() for chunk in value.split(",") if chunk.strip())


def load_configuration(
    dotenv_path: str | Path | None = None,
    *,
    override_env: bool = False,
    **overrides: Any,
) -> ProofreaderConfiguration:
    """Build a :class:`ProofreaderConfiguration` from the environment.

    ``dotenv_path`` names a ``.env`` file to load first; without it the
    default ``.env`` lookup of python-dotenv applies. Keyword ``overrides``
    (``None`` values ignored) replace the matching fields.
    """
    if dotenv_path is not None:
        load_dotenv(dotenv_path=Path(dotenv_path), override=override_env)
    else:
        load_dotenv(override=override_env)

    api_key = os.environ.get("PROOFREADER_API_KEY") or os.environ.get("ANTHROPIC_API_KEY")
    primary = _split_names(os.environ.get("LLM_PRIMARY"))

    configuration = ProofreaderConfiguration(
        api_key=api_key or None,
        relay_url=os.environ.get("PROOFREADER_RELAY_URL") or DEFAULT_RELAY_URL,
        anthropic_url=os.environ.get("PROOFREADER_ANTHROPIC_URL") or DEFAULT_ANTHROPIC_URL,
        model=os.environ.get("PROOFREADER_MODEL") or DEFAULT_MODEL,
        request_timeout=_read_float_env(
            "PROOFREADER_REQUEST_TIMEOUT", default=DEFAULT_REQUEST_TIMEOUT
        ),
        min_text_length=_read_int_env(
            "PROOFREADER_MIN_TEXT_LENGTH", default=DEFAULT_MIN_TEXT_LENGTH
        ),
        style_mode=_read_style_mode("PROOFREADER_STYLE_MODE"),
        degrade_on_malformed=_read_bool_env("PROOFREADER_DEGRADE_ON_MALFORMED", default=True),
        primary_provider=primary[0] if primary else DEFAULT_PRIMARY_PROVIDER,
        fallback_providers=primary[1:] + _split_names(os.environ.get("LLM_FALLBACK")),
    )
    return configuration.with_overrides(**overrides)
