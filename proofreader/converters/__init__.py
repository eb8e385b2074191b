"""Text sources: PDF extraction and plain text files."""

from __future__ import annotations

from .base import ConversionResult, DocumentTextConverter
from .converters import (
    MAX_PDF_BYTES,
    create_converter,
    extract_pdf_text,
    read_text_file,
    validate_pdf_file,
)
from .pdf_converter import PdfTextConverter
from .text_converter import PlainTextConverter

__all__ = [
    "MAX_PDF_BYTES",
    "ConversionResult",
    "DocumentTextConverter",
    "PdfTextConverter",
    "PlainTextConverter",
    "create_converter",
    "extract_pdf_text",
    "read_text_file",
    "validate_pdf_file",
]
