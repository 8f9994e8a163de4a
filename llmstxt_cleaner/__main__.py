"""Module entrypoint for running llmstxt-cleaner as ``python -m llmstxt_cleaner``."""

from __future__ import annotations

from llmstxt_cleaner.cli import main


if __name__ == "__main__":
    main()
