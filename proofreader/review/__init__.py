"""Merge, rank and orchestrate a proofreading run."""

from __future__ import annotations

from .merger import dedupe_model_errors, merge
from .orchestrator import Proofreader
from .prompt_factory import build_prompt
from .result import ProofreadResult

__all__ = [
    "ProofreadResult",
    "Proofreader",
    "build_prompt",
    "dedupe_model_errors",
    "merge",
]
