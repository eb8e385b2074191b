"""Pick a converter for a source file and check it before reading."""

from __future__ import annotations

from pathlib import Path

from proofreader.models import InputError

from .base import ConversionResult, DocumentTextConverter
from .pdf_converter import PdfTextConverter
from .text_converter import PlainTextConverter

MAX_PDF_BYTES = 10 * 1024 * 1024


def create_converter(converter_type: str) -> DocumentTextConverter:
    """Factory function to create a converter of the specified type.

    Args:
        converter_type: Type of converter to create ('pdf' or 'text').

    Raises:
        ValueError: If the converter type is not recognized.
    """
    converter_type = converter_type.lower()

    if converter_type == "pdf":
        return PdfTextConverter()
    elif converter_type == "text":
        return PlainTextConverter()
    else:
        raise ValueError(
            f"Unknown converter type: {converter_type}. "
            f"Valid options are: 'pdf', 'text'"
        )


def validate_pdf_file(path: Path, *, max_bytes: int = MAX_PDF_BYTES) -> None:
    """Raise :class:`InputError` unless ``path`` is an existing PDF within the size limit."""
    if path.suffix.lower() != ".pdf":
        raise InputError(f"{path.name} is not a PDF file")
    if not path.is_file():
        raise InputError(f"File not found: {path}")
    size = path.stat().st_size
    if size > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise InputError(f"{path.name} is larger than {limit_mb:g} MB")


def extract_pdf_text(path: str | Path, *, max_bytes: int = MAX_PDF_BYTES) -> ConversionResult:
    pdf_path = Path(path)
    validate_pdf_file(pdf_path, max_bytes=max_bytes)
    converter = create_converter("pdf")
    try:
        return converter.convert(pdf_path)
    finally:
        converter.close()


def read_text_file(path: str | Path) -> ConversionResult:
    text_path = Path(path)
    if not text_path.is_file():
        raise InputError(f"File not found: {text_path}")
    converter = create_converter("text")
    try:
        return converter.convert(text_path)
    finally:
        converter.close()
