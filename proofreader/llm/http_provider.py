"""Shared ``requests`` plumbing for JSON-over-HTTP providers.

The relay function answers with a Messages-shaped JSON body whose
``content[0].text`` carries the model output. Failures are mapped onto the
:mod:`proofreader.llm.provider` hierarchy here so every provider reports
them the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

import requests

from .provider import (
    AuthError,
    LLMProviderError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


def error_message_from_body(body: Any) -> str | None:
    """Return ``error.message`` or a string ``error`` field when present."""
    if not isinstance(body, Mapping):
        return None
    error = body.get("error")
    if isinstance(error, str) and error.strip():
        return error.strip()
    if isinstance(error, Mapping):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def extract_response_text(body: Any) -> str | None:
    """Return ``content[0].text`` from a decoded body, or ``None``."""
    if not isinstance(body, Mapping):
        return None
    content = body.get("content")
    if not isinstance(content, list) or not content:
        return None
    first = content[0]
    if not isinstance(first, Mapping):
        return None
    text = first.get("text")
    if not isinstance(text, str) or not text:
        return None
    return text


def _decode(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def handle_response(response: requests.Response, *, provider_name: str) -> str:
    """Map an HTTP response onto model text or a provider error."""
    status = response.status_code
    body = _decode(response)
    server_message = error_message_from_body(body)

    if status == 401:
        raise AuthError(status_code=status)
    if status == 429:
        raise RateLimitError(status_code=status)
    if not 200 <= status < 300:
        message = server_message or f"{provider_name} request failed with HTTP {status}"
        raise LLMProviderError(message, status_code=status)

    if body is None:
        raise MalformedResponseError(
            f"{provider_name} returned a non-JSON body",
            response_text=response.text,
            status_code=status,
        )
    text = extract_response_text(body)
    if text is None:
        raise MalformedResponseError(
            f"{provider_name} response has no content[0].text",
            response_text=response.text,
            status_code=status,
        )
    return text


class HttpLLMProvider(ABC):
    """Base class: POST a JSON payload and read ``content[0].text`` back.

    Subclasses provide ``name``, ``endpoint`` and :meth:`build_request`.
    """

    name = "http"

    def __init__(
        self,
        *,
        endpoint: str,
        api_key: str | None,
        model: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not api_key:
            raise AuthError(
                f"{self.name} provider needs an API key; set PROOFREADER_API_KEY "
                "in your .env file or environment."
            )
        self.endpoint = endpoint
        self.model = model
        self.timeout = timeout
        self._api_key = api_key

    @abstractmethod
    def build_request(self, prompt: str) -> tuple[dict[str, str], dict[str, Any]]:
        """Return ``(headers, json_payload)`` for ``prompt``."""

    def generate(self, prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise ValueError("prompt must not be empty.")

        headers, payload = self.build_request(prompt)
        LOGGER.debug(
            "POST %s (provider=%s, model=%s, %d prompt chars)",
            self.endpoint,
            self.name,
            self.model,
            len(prompt),
        )
        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            raise NetworkError(
                f"{self.name} request timed out after {self.timeout:g}s"
            ) from exc
        except requests.RequestException as exc:
            raise NetworkError(f"Could not reach {self.name} at {self.endpoint}: {exc}") from exc

        LOGGER.debug("%s responded with HTTP %s", self.name, response.status_code)
        return handle_response(response, provider_name=self.name)
