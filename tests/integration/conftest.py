"""Integration-test fixtures for deterministic CLI behavior."""

from __future__ import annotations

import pytest

_LLMSTXT_ENV_KEYS = (
    "LLMSTXT_FILTER_ENGLISH",
    "LLMSTXT_REMOVE_HEADERS_FOOTERS",
    "LLMSTXT_CLEAN_EXPORT",
    "LLMSTXT_THRESHOLD",
    "LLMSTXT_MAX_INPUT_BYTES",
)


@pytest.fixture(autouse=True)
def _isolate_llmstxt_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear `LLMSTXT_*` variables so host settings never leak into CLI runs."""

    for key in _LLMSTXT_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
