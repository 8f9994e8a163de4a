"""Top-level package for llmstxt-cleaner.

This package post-processes scraped website text aggregated into llms.txt /
llms-full.txt artifacts: cross-page header/footer removal, heuristic English
line filtering, and clean export. The three stages are pure functions; the
`LlmsTextPipeline` composes them for callers.
"""

from .pipeline import LlmsTextPipeline, PipelineResult
from .text import (
    export_clean_text,
    filter_english_lines,
    filter_english_text,
    remove_headers_footers,
)

__all__ = [
    "LlmsTextPipeline",
    "PipelineResult",
    "export_clean_text",
    "filter_english_lines",
    "filter_english_text",
    "remove_headers_footers",
    "__version__",
]

__version__ = "1.0.0"
