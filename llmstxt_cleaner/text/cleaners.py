"""Composable cleaning rules for llms.txt artifacts.

Responsibilities:
- Wrap each text stage in a rule object with a uniform `apply` contract.
- Record per-call diagnostics that the pipeline reports back to callers.
"""

from __future__ import annotations

from typing import Protocol

from .boilerplate import DEFAULT_THRESHOLD, find_repetitive_lines, remove_headers_footers
from .exporter import export_clean_text
from .language import filter_english_text
from .lines import join_pages, split_pages


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class RemoveHeadersFooters:
    """Remove lines repeated across most pages of a document.

    The document is split into pages on blank-line runs and rejoined with a
    single blank line. Documents with fewer than two non-blank pages are left
    untouched, since one page would lose every line. Empty chunks from leading
    or trailing blank runs do not count as pages here.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        """Initialize rule with a page-frequency threshold."""

        self.threshold = threshold
        self.last_page_count = 0
        self.last_repetitive_line_count = 0
        self.last_skipped = False

    def apply(self, text: str) -> str:
        """Apply header/footer cleanup rule."""

        pages = split_pages(text)
        self.last_page_count = len(pages)
        content_pages = sum(1 for page in pages if page.strip())
        self.last_skipped = content_pages < 2
        if self.last_skipped:
            self.last_repetitive_line_count = 0
            return text

        self.last_repetitive_line_count = len(find_repetitive_lines(pages, self.threshold))
        return join_pages(remove_headers_footers(pages, self.threshold))


class FilterEnglish:
    """Keep only lines that look like English prose."""

    def __init__(self) -> None:
        self.last_kept_line_count = 0

    def apply(self, text: str) -> str:
        """Apply English line filter."""

        filtered = filter_english_text(text)
        self.last_kept_line_count = len(filtered.split("\n")) if filtered else 0
        return filtered


class ExportCleanText:
    """Trim lines, collapse blank runs, and NFC-normalize text."""

    def apply(self, text: str) -> str:
        return export_clean_text(text)
