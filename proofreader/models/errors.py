"""Base exceptions for a proofreading run.

Provider-specific failures live in :mod:`proofreader.llm.provider` and derive
from :class:`ProofreadError` so callers can handle every run failure with one
``except`` clause.
"""

from __future__ import annotations


class ProofreadError(Exception):
    """Base class for any failure of a proofreading run."""

    user_message = "Proofreading failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)


class InputError(ProofreadError):
    """Raised when the text or its context cannot be proofread at all."""

    user_message = "Invalid input"
