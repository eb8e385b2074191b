from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Protocol

from proofreader.models.errors import ProofreadError

if TYPE_CHECKING:
    from proofreader.config import ProofreaderConfiguration

ProviderReporter = Callable[[str, "ProviderStatus", Exception | None], None]


class ProviderStatus(str, Enum):
    """Status used when reporting the outcome of a provider call."""

    SUCCESS = "success"
    RATE_LIMITED = "rate_limited"
    FAILURE = "failure"


class LLMProviderError(ProofreadError):
    """Generic failure raised by an LLM provider."""

    user_message = "The proofreading service returned an error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(LLMProviderError):
    """Raised when the request never produced an HTTP response."""

    user_message = "Could not reach the proofreading service"


class RunCancelledError(NetworkError):
    """Raised when the caller cancelled the run or its overall timeout expired."""

    user_message = "Proofreading was cancelled"


class AuthError(LLMProviderError):
    """Raised when the provider rejects the API key."""

    user_message = "invalid API key"


class RateLimitError(LLMProviderError):
    """Raised when a provider reports rate-limit exhaustion."""

    user_message = "rate limited"


class MalformedResponseError(LLMProviderError):
    """Raised when a response body does not carry ``content[0].text``.

    The raw body is kept to aid debugging when the provider returns
    unexpected content.
    """

    user_message = "The proofreading service returned an unexpected response"

    def __init__(
        self,
        message: str | None = None,
        *,
        response_text: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.response_text = response_text

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.response_text is not None:
            # Truncate very long responses for readability
            text = self.response_text
            if len(text) > 2000:
                text = text[:2000] + "... [truncated]"
            parts.append(f"\n--- LLM Response ---\n{text}")
        return "".join(parts)


class LLMProvider(Protocol):
    """Shared contract for LLM providers."""

    name: str

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return the model's text response."""
        ...


class ProviderFactory(Protocol):
    def __call__(self, *, configuration: "ProofreaderConfiguration") -> LLMProvider: ...
