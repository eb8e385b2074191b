"""Utilities for working with page markers in extracted document text.

PDF extraction emits one block per page in the format::

    Page N:
    <page text>

Functions:
    - format_page_block: Render one page block in the marker format
    - find_page_markers: Find all page markers in text
    - build_line_page_map: Map 0-based line indexes to page numbers
    - extract_page_text: Extract the text of a single page
    - page_number_from_location: Read a page number out of a locator string
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Page marker pattern: "Page N:" alone on its line
PAGE_MARKER_PATTERN = re.compile(r"^Page (\d+):[ \t]*$", re.MULTILINE)

_LOCATION_PAGE_PATTERN = re.compile(r"\bpage\s+(\d+)\b", re.IGNORECASE)


@dataclass
class PageMarker:
    """Represents a page marker found in text."""

    page_number: int
    position: int  # Character position in text where marker starts
    line_index: int  # 0-based line of the marker


def format_page_block(page_number: int, page_text: str) -> str:
    """Return ``page_text`` wrapped in the page marker format."""
    return f"Page {page_number}:\n{page_text}\n\n"


def find_page_markers(text: str) -> list[PageMarker]:
    """Find all page markers in the text.

    Example:
        >>> markers = find_page_markers("Page 1:\\nHello\\n\\nPage 2:\\nWorld")
        >>> [(m.page_number, m.line_index) for m in markers]
        [(1, 0), (2, 3)]
    """
    markers: list[PageMarker] = []

    for match in PAGE_MARKER_PATTERN.finditer(text):
        position = match.start()
        markers.append(
            PageMarker(
                page_number=int(match.group(1)),
                position=position,
                line_index=text.count("\n", 0, position),
            )
        )

    return markers


def build_line_page_map(text: str) -> dict[int, int]:
    """Build a map from 0-based line index to page number.

    Lines before the first marker are not included. Returns an empty map when
    the text has no page markers (plain pasted text).
    """
    markers = find_page_markers(text)
    if not markers:
        return {}

    total_lines = text.count("\n") + 1
    line_to_page: dict[int, int] = {}
    for idx, marker in enumerate(markers):
        end = markers[idx + 1].line_index if idx + 1 < len(markers) else total_lines
        for line_index in range(marker.line_index, end):
            line_to_page[line_index] = marker.page_number
    return line_to_page


def extract_page_text(text: str, page_number: int) -> str:
    """Extract the content of one page, without its marker line.

    Returns an empty string when the page is not present.
    """
    markers = find_page_markers(text)
    for idx, marker in enumerate(markers):
        if marker.page_number != page_number:
            continue
        body_start = text.find("\n", marker.position)
        if body_start == -1:
            return ""
        end = markers[idx + 1].position if idx + 1 < len(markers) else len(text)
        return text[body_start + 1 : end].strip()
    return ""


def page_number_from_location(location: str) -> int | None:
    """Return N from locators such as ``"Page 2, Paragraph 3"``."""
    match = _LOCATION_PAGE_PATTERN.search(location or "")
    if not match:
        return None
    return int(match.group(1))
