from __future__ import annotations

from pathlib import Path

from proofreader.models import InputError

from .base import ConversionResult, DocumentTextConverter


class PlainTextConverter(DocumentTextConverter):
    """Read a UTF-8 text file as-is."""

    def convert(self, path: Path) -> ConversionResult:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise InputError(f"{path.name} is not UTF-8 text") from exc
        except OSError as exc:
            raise InputError(f"Could not read {path}: {exc}") from exc
        return ConversionResult(text=text, metadata={"characters": len(text)})
