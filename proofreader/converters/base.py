"""Base classes shared by the text-source converters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class ConversionResult:
    """Text extracted from a source file."""

    text: str
    metadata: dict[str, Any] | None = None


class DocumentTextConverter(ABC):
    """Turn a file on disk into the plain text the proofreader consumes."""

    @abstractmethod
    def convert(self, path: Path) -> ConversionResult:
        pass

    def close(self) -> None:
        pass
