"""Text normalization components.

This package provides the three stateless cleaning stages, header/footer
removal, English line filtering, and clean export, plus rule wrappers used
by the pipeline.
"""

from .boilerplate import find_repetitive_lines, remove_headers_footers
from .cleaners import ExportCleanText, FilterEnglish, RemoveHeadersFooters
from .exporter import export_clean_text
from .language import filter_english_lines, filter_english_text, is_english
from .lines import join_pages, split_lines, split_pages

__all__ = [
    "remove_headers_footers",
    "find_repetitive_lines",
    "filter_english_text",
    "filter_english_lines",
    "is_english",
    "export_clean_text",
    "split_lines",
    "split_pages",
    "join_pages",
    "RemoveHeadersFooters",
    "FilterEnglish",
    "ExportCleanText",
]
