"""Shared pytest fixtures for the llmstxt-cleaner test suite."""

from __future__ import annotations

import pytest

LLMS_FULL_DOCUMENT = (
    "Docs Home\n"
    "This is the first page and it has real content.\n"
    "\n"
    "Docs Home\n"
    "The second page is about the setup of a project.\n"
    "\n"
    "Docs Home\n"
    "## 安装\n"
    "The third page covers what to do at the end."
)

CLEANED_DOCUMENT = (
    "This is the first page and it has real content.\n"
    "The second page is about the setup of a project.\n"
    "The third page covers what to do at the end."
)


@pytest.fixture
def llms_full_document() -> str:
    """Provide a three-page scraped document with a shared navigation line."""

    return LLMS_FULL_DOCUMENT


@pytest.fixture
def cleaned_document() -> str:
    """Provide the expected output of the full pipeline for `llms_full_document`."""

    return CLEANED_DOCUMENT
