"""Clients for the remote proofreading model."""

from __future__ import annotations

from .anthropic_llm import AnthropicLLM
from .provider import (
    AuthError,
    LLMProvider,
    LLMProviderError,
    MalformedResponseError,
    NetworkError,
    ProviderStatus,
    RateLimitError,
    RunCancelledError,
)
from .relay_llm import RelayLLM
from .service import LLMService

__all__ = [
    "AnthropicLLM",
    "AuthError",
    "LLMProvider",
    "LLMProviderError",
    "LLMService",
    "MalformedResponseError",
    "NetworkError",
    "ProviderStatus",
    "RateLimitError",
    "RelayLLM",
    "RunCancelledError",
]
