"""Heuristic English line filtering.

Responsibilities:
- Classify single lines as English-looking prose without a language model.
- Keep only passing lines, in order and unmodified.

The heuristic requires two distinct space-bounded stopwords plus a high share
of ASCII letters. Stopwords next to punctuation (`the,`) do not match.
"""

from __future__ import annotations

from collections.abc import Sequence
import re

from .lines import split_lines

# Matched against the lower-cased line, so the capital "I" never counts.
ENGLISH_STOPWORDS = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "I",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
)

MIN_LINE_LENGTH = 10
MIN_STOPWORD_MATCHES = 2
MIN_ASCII_LETTER_RATIO = 0.6

_ASCII_LETTER_RE = re.compile(r"[a-zA-Z]")
_WHITESPACE_RE = re.compile(r"\s")


def _count_stopwords(lower: str) -> int:
    """Count distinct space-bounded stopwords, stopping once enough are found."""

    count = 0
    for word in ENGLISH_STOPWORDS:
        if (
            f" {word} " in lower
            or lower.startswith(f"{word} ")
            or lower.endswith(f" {word}")
        ):
            count += 1
            if count >= MIN_STOPWORD_MATCHES:
                break
    return count


def _ascii_letter_ratio(line: str) -> float:
    """Return ASCII letters divided by non-whitespace characters."""

    total_chars = len(_WHITESPACE_RE.sub("", line))
    if total_chars == 0:
        return 0.0
    return len(_ASCII_LETTER_RE.findall(line)) / total_chars


def is_english(line: object) -> bool:
    """Return whether a single line looks like English prose."""

    if not isinstance(line, str) or len(line.strip()) < MIN_LINE_LENGTH:
        return False

    return (
        _count_stopwords(line.lower()) >= MIN_STOPWORD_MATCHES
        and _ascii_letter_ratio(line) > MIN_ASCII_LETTER_RATIO
    )


def filter_english_lines(lines: Sequence[str] | None) -> list[str]:
    """Return the lines that pass `is_english`, in original order."""

    if not isinstance(lines, Sequence) or isinstance(lines, str):
        return []
    return [line for line in lines if is_english(line)]


def filter_english_text(text: str | None) -> str:
    """Filter a text blob line by line and rejoin kept lines with `\\n`."""

    if not isinstance(text, str) or not text:
        return ""
    return "\n".join(filter_english_lines(split_lines(text)))
