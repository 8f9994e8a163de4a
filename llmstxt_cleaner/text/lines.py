"""Shared line and page splitting helpers.

Responsibilities:
- Split text on either line-ending convention (LF or CRLF).
- Provide the page split/rejoin used around header/footer removal.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

_LINE_BREAK_RE = re.compile(r"\r?\n")
_PAGE_BREAK_RE = re.compile(r"(?:\r?\n){2,}")

PAGE_SEPARATOR = "\n\n"


def split_lines(text: str) -> list[str]:
    """Split text into lines on LF or CRLF boundaries."""

    return _LINE_BREAK_RE.split(text)


def split_pages(text: str) -> list[str]:
    """Split a document into page-like chunks on runs of two or more line breaks."""

    return _PAGE_BREAK_RE.split(text)


def join_pages(pages: Iterable[str]) -> str:
    """Rejoin pages with a single blank line between them."""

    return PAGE_SEPARATOR.join(pages)
