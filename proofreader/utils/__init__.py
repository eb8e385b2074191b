"""Utility modules for the proofreader."""

from __future__ import annotations

from . import page_utils

__all__ = [
    "page_utils",
]
