from __future__ import annotations

from typing import Sequence

from .provider import (
    LLMProvider,
    LLMProviderError,
    ProviderReporter,
    ProviderStatus,
    RateLimitError,
)


class LLMService:
    """Facade that routes LLM requests across a priority-ordered provider list."""

    def __init__(
        self,
        providers: Sequence[LLMProvider],
        *,
        reporter: ProviderReporter | None = None,
    ) -> None:
        if not providers:
            raise ValueError("LLMService needs at least one provider")
        self._providers = list(providers)
        self._reporter = reporter

    @property
    def name(self) -> str:
        return "+".join(self.provider_order())

    def provider_order(self) -> list[str]:
        """Return the provider names in configured order."""

        return [provider.name for provider in self._providers]

    def generate(self, prompt: str) -> str:
        """Try each provider until one succeeds or every one is rate limited."""

        last_error: RateLimitError | None = None
        for provider in self._providers:
            try:
                value = provider.generate(prompt)
                self._report(provider.name, ProviderStatus.SUCCESS)
                return value
            except RateLimitError as exc:
                last_error = exc
                self._report(provider.name, ProviderStatus.RATE_LIMITED, exc)
                continue
            except LLMProviderError as exc:
                self._report(provider.name, ProviderStatus.FAILURE, exc)
                raise
        status_code = last_error.status_code if last_error is not None else None
        raise RateLimitError(
            "All providers are rate limited", status_code=status_code
        ) from last_error

    def _report(
        self,
        provider_name: str,
        status: ProviderStatus,
        error: Exception | None = None,
    ) -> None:
        if self._reporter is None:
            return
        self._reporter(provider_name, status, error)
