"""Unit tests for clean text export."""

from __future__ import annotations

import re

import pytest

from llmstxt_cleaner.text.exporter import export_clean_text


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n", None, 7])
def test_export_clean_text_returns_empty_string_for_blank_input(text: object) -> None:
    assert export_clean_text(text) == ""  # type: ignore[arg-type]


def test_export_clean_text_trims_lines_and_collapses_blank_runs() -> None:
    assert export_clean_text("  a  \n\n\n b \n") == "a\n\nb"


def test_export_clean_text_trims_each_line() -> None:
    text = "  Line with leading spaces\nLine with trailing spaces   \n   Both   "

    assert export_clean_text(text) == (
        "Line with leading spaces\nLine with trailing spaces\nBoth"
    )


def test_export_clean_text_treats_whitespace_only_lines_as_blank() -> None:
    assert export_clean_text("First line\n   \n\t\n \t \nSecond line") == "First line\n\nSecond line"


def test_export_clean_text_normalizes_paragraph_breaks() -> None:
    text = "Paragraph 1\nStill paragraph 1\n\nParagraph 2\n\n\nParagraph 3"

    assert export_clean_text(text) == (
        "Paragraph 1\nStill paragraph 1\n\nParagraph 2\n\nParagraph 3"
    )


def test_export_clean_text_drops_leading_and_trailing_blank_lines() -> None:
    assert export_clean_text("\n\n  Title\nBody\n\n\n") == "Title\nBody"


def test_export_clean_text_handles_crlf() -> None:
    assert export_clean_text("a\r\n\r\nb\r\n") == "a\n\nb"


def test_export_clean_text_applies_nfc_normalization() -> None:
    """Decomposed characters should be composed into their NFC form."""

    assert export_clean_text("cafe\u0301\nre\u0301sume\u0301") == "caf\u00e9\nr\u00e9sum\u00e9"


_SAMPLES = [
    "  First line  \n  \n\nSecond line\n\n\n\n  Third line with spaces  \n    \nFourth line",
    "\r\n\r\n  Heading\r\n\r\n\r\nBody text\t\r\n",
    "single",
    "cafe\u0301  \n\n\n\n  na\u0308ive",
    "\n\n\n",
]


@pytest.mark.parametrize("text", _SAMPLES)
def test_export_clean_text_is_idempotent(text: str) -> None:
    once = export_clean_text(text)

    assert export_clean_text(once) == once


@pytest.mark.parametrize("text", _SAMPLES)
def test_export_clean_text_output_has_no_padding_or_double_blank_lines(text: str) -> None:
    cleaned = export_clean_text(text)

    assert "\n\n\n" not in cleaned
    for line in cleaned.split("\n"):
        assert not re.search(r"^\s|\s$", line)
