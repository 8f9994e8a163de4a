"""Cross-page header/footer removal.

Responsibilities:
- Find lines that recur across a large fraction of pages.
- Strip those lines from every page while keeping page order and all other lines.

A line counts at most once per page toward its frequency, so a line repeated
inside a single page is never amplified into looking globally frequent.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .lines import split_lines

DEFAULT_THRESHOLD = 0.6


def _page_text(page: object) -> str:
    """Return page text, treating non-string entries as empty pages."""

    return page if isinstance(page, str) else ""


def find_repetitive_lines(pages: Sequence[str], threshold: float = DEFAULT_THRESHOLD) -> set[str]:
    """Return trimmed lines present in at least `threshold` fraction of pages.

    Args:
        pages: Page texts; each may contain several lines.
        threshold: Minimum fraction of pages a trimmed line must appear in.

    Returns:
        Set of trimmed line values classified as boilerplate.
    """

    total_pages = len(pages)
    if total_pages == 0:
        return set()

    line_counts: Counter[str] = Counter()
    for page in pages:
        seen = {line.strip() for line in split_lines(_page_text(page))}
        seen.discard("")
        line_counts.update(seen)

    return {line for line, count in line_counts.items() if count / total_pages >= threshold}


def remove_headers_footers(
    pages: Sequence[str] | None, threshold: float = DEFAULT_THRESHOLD
) -> list[str]:
    """Remove repetitive header/footer lines from every page.

    Output pages correspond positionally to input pages. Lines are compared by
    their trimmed form but emitted untouched; blank lines are always kept.
    With a single page every distinct non-blank line reaches 100% frequency and
    is removed, so callers should not feed one-page input.

    Args:
        pages: Ordered page texts. `None`, a bare string, or an empty sequence
            yields an empty list.
        threshold: Minimum fraction of pages for a line to count as boilerplate.
            Not validated: values above 1 remove nothing, values at or below 0
            remove every non-blank line.
    """

    if not isinstance(pages, Sequence) or isinstance(pages, str) or not pages:
        return []

    repetitive_lines = find_repetitive_lines(pages, threshold)
    cleaned_pages: list[str] = []
    for page in pages:
        kept = [
            line
            for line in split_lines(_page_text(page))
            if line.strip() not in repetitive_lines
        ]
        cleaned_pages.append("\n".join(kept))
    return cleaned_pages
