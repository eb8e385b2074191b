from __future__ import annotations

from typing import Sequence

from proofreader.config import ProofreaderConfiguration

from .anthropic_llm import AnthropicLLM
from .provider import LLMProvider, ProviderFactory
from .relay_llm import RelayLLM


def _relay_factory(*, configuration: ProofreaderConfiguration) -> LLMProvider:
    return RelayLLM(
        api_key=configuration.api_key,
        model=configuration.model,
        endpoint=configuration.relay_url,
        timeout=configuration.request_timeout,
    )


def _anthropic_factory(*, configuration: ProofreaderConfiguration) -> LLMProvider:
    return AnthropicLLM(
        api_key=configuration.api_key,
        model=configuration.model,
        base_url=configuration.anthropic_url,
        timeout=configuration.request_timeout,
    )


_PROVIDER_FACTORIES: dict[str, ProviderFactory] = {
    "relay": _relay_factory,
    "anthropic": _anthropic_factory,
}


def available_providers() -> list[str]:
    return list(_PROVIDER_FACTORIES)


def _split_names(value: str | None) -> list[str]:
    if not value:
        return []
    return [chunk.strip().lower() for chunk in value.split(",") if chunk.strip()]


def create_provider_chain(
    configuration: ProofreaderConfiguration,
    *,
    primary: str | None = None,
    fallbacks: Sequence[str] | None = None,
) -> list[LLMProvider]:
    """Return configured providers honoring explicit and configured priority.

    ``primary`` (comma-separated) and ``fallbacks`` replace the order from
    ``LLM_PRIMARY``/``LLM_FALLBACK`` captured in ``configuration``.
    """

    order: list[str] = []
    seen: set[str] = set()

    candidates: list[str] = []
    if primary:
        candidates.extend(_split_names(primary))
    else:
        candidates.append(configuration.primary_provider.lower())

    if fallbacks:
        candidates.extend(name.lower() for name in fallbacks)
    else:
        candidates.extend(configuration.fallback_providers)

    for name in candidates:
        if name in seen:
            continue
        seen.add(name)
        if name not in _PROVIDER_FACTORIES:
            raise ValueError(f"Unknown LLM provider '{name}'")
        order.append(name)

    return [_PROVIDER_FACTORIES[name](configuration=configuration) for name in order]
