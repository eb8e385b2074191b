from __future__ import annotations

import logging
from typing import Any

import anthropic

from proofreader.config import DEFAULT_ANTHROPIC_URL

from .http_provider import DEFAULT_TIMEOUT
from .provider import (
    AuthError,
    LLMProviderError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
)

LOGGER = logging.getLogger(__name__)


def _first_text_block(message: Any) -> str | None:
    for block in getattr(message, "content", None) or []:
        if getattr(block, "type", None) != "text":
            continue
        text = getattr(block, "text", None)
        if isinstance(text, str) and text:
            return text
    return None


class AnthropicLLM:
    """Wrapper around the Anthropic SDK sending a single user message.

    A pre-built ``client`` may be injected; otherwise one is created from the
    API key, base URL and timeout.
    """

    name = "anthropic"
    MAX_TOKENS = 4000

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        base_url: str = DEFAULT_ANTHROPIC_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: anthropic.Anthropic | None = None,
    ) -> None:
        if client is None and not api_key:
            raise AuthError(
                f"{self.name} provider needs an API key; set PROOFREADER_API_KEY "
                "or ANTHROPIC_API_KEY in your .env file or environment."
            )
        self.model = model
        self.timeout = timeout
        self.base_url = base_url
        # Retries and fallbacks are handled by LLMService.
        self._client = client or anthropic.Anthropic(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    def generate(self, prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise ValueError("prompt must not be empty.")

        LOGGER.debug(
            "Calling %s messages API (model=%s, %d prompt chars)",
            self.name,
            self.model,
            len(prompt),
        )
        try:
            message = self._client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AuthenticationError as exc:
            raise AuthError(status_code=exc.status_code) from exc
        except anthropic.RateLimitError as exc:
            raise RateLimitError(status_code=exc.status_code) from exc
        except anthropic.APIStatusError as exc:
            raise LLMProviderError(
                f"{self.name} request failed with HTTP {exc.status_code}: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except anthropic.APITimeoutError as exc:
            raise NetworkError(
                f"{self.name} request timed out after {self.timeout:g}s"
            ) from exc
        except anthropic.APIConnectionError as exc:
            raise NetworkError(f"Could not reach {self.name} at {self.base_url}: {exc}") from exc

        text = _first_text_block(message)
        if text is None:
            raise MalformedResponseError(
                f"{self.name} response has no text content block",
                response_text=repr(getattr(message, "content", message)),
            )
        return text
