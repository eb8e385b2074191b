from __future__ import annotations

import logging
import re
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from proofreader.models import InputError
from proofreader.utils.page_utils import format_page_block

from .base import ConversionResult, DocumentTextConverter

LOGGER = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


class PdfTextConverter(DocumentTextConverter):
    """Extract text from a PDF with pypdf, one ``Page N:`` block per page.

    Pages without extractable text are left out; the page numbers of the
    remaining blocks still match the PDF.
    """

    def convert(self, path: Path) -> ConversionResult:
        try:
            reader = PdfReader(str(path))
            page_count = len(reader.pages)
            blocks: list[str] = []
            for index, page in enumerate(reader.pages, start=1):
                page_text = _collapse_whitespace(page.extract_text() or "")
                if page_text:
                    blocks.append(format_page_block(index, page_text))
        except (PdfReadError, OSError, ValueError) as exc:
            raise InputError(f"Error reading PDF {path.name}: {exc}") from exc

        text = "".join(blocks)
        if not text.strip():
            raise InputError(
                "No text content found in PDF. The PDF might be scanned or image-based."
            )
        LOGGER.info(
            "Extracted text from %d of %d page(s) of %s", len(blocks), page_count, path.name
        )
        return ConversionResult(
            text=text,
            metadata={"page_count": page_count, "pages_with_text": len(blocks)},
        )
