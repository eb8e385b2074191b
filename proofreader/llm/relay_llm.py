from __future__ import annotations

from typing import Any

from proofreader.config import DEFAULT_RELAY_URL

from .http_provider import DEFAULT_TIMEOUT, HttpLLMProvider


class RelayLLM(HttpLLMProvider):
    """Send the prompt through the serverless relay function.

    The relay forwards ``text`` to the Messages API with the caller's key and
    passes the upstream body (or ``{"error": ...}``) back unchanged.
    """

    name = "relay"

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        endpoint: str = DEFAULT_RELAY_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(endpoint=endpoint, api_key=api_key, model=model, timeout=timeout)

    def build_request(self, prompt: str) -> tuple[dict[str, str], dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "Cache-Control": "no-cache",
        }
        payload = {"text": prompt, "apiKey": self._api_key, "model": self.model}
        return headers, payload
