"""Utilities for exporting proofreading results.

The plain-text export is the clipboard format: one
``- {location} > "{error}" should be "{correction}"`` line per record, the
same shape the response parser reads back. The CSV and Markdown builders
follow the column layout used across the project's reports.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable

from proofreader.models import ErrorRecord

CSV_HEADER = [
    "Location",
    "Page",
    "Kind",
    "Rule ID",
    "Error",
    "Correction",
    "Explanation",
    "Highlighted Context",
]


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


def issue_count_label(count: int) -> str:
    if count == 0:
        return "No issues found"
    return f"{count} issue{'' if count == 1 else 's'} found"


def build_report_text(
    records: Iterable[ErrorRecord], *, include_explanations: bool = False
) -> str:
    """Return the plain-text export, one line per record."""
    return "\n".join(
        record.to_export_line(include_explanation=include_explanations) for record in records
    )


def build_report_csv(records: Iterable[ErrorRecord]) -> list[list[str]]:
    """Convert records into CSV data.

    Returns a list of rows, where each row is a list of string values.
    The first row contains the column headers.
    """
    rows: list[list[str]] = [list(CSV_HEADER)]
    for record in records:
        page_num = str(record.page_number) if record.page_number is not None else ""
        rows.append([
            record.location,
            page_num,
            record.kind.value,
            record.rule_id,
            record.error_text,
            record.correction_text,
            record.display_explanation,
            record.context,
        ])
    return rows


def render_csv(records: Iterable[ErrorRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(build_report_csv(records))
    return buffer.getvalue()


def build_report_markdown(
    records: Iterable[ErrorRecord],
    *,
    title: str = "Proofreading Report",
    document_type: str | None = None,
    warnings: Iterable[str] = (),
) -> str:
    """Convert records into a Markdown report with a summary line."""
    record_list = list(records)

    lines: list[str] = []
    lines.append(f"# {title}")
    lines.append("")
    if document_type:
        lines.append(f"- Document type: {document_type}")
    lines.append(f"- {issue_count_label(len(record_list))}")

    warning_list = list(warnings)
    if warning_list:
        lines.append("")
        lines.append("## Warnings")
        for warning in warning_list:
            lines.append(f"- {warning}")

    if not record_list:
        lines.append("")
        lines.append("_No errors were found according to the brand style guidelines._")
        return "\n".join(lines)

    lines.append("")
    lines.append("| Location | Kind | Error | Correction | Explanation | Context |")
    lines.append("| --- | --- | --- | --- | --- | --- |")
    for record in record_list:
        error_text = _escape_cell(record.error_text) if record.error_text else "—"
        correction = _escape_cell(record.correction_text) if record.correction_text else "—"
        context = _escape_cell(record.context) if record.context else "—"
        lines.append(
            f"| {_escape_cell(record.location)} | {record.kind.value} | {error_text} | "
            f"{correction} | {_escape_cell(record.display_explanation)} | {context} |"
        )

    return "\n".join(lines)
