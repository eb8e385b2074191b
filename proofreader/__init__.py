"""Brand style proofreading: rule checks plus a tolerant LLM response parser."""

from __future__ import annotations

__version__ = "0.1.0"
