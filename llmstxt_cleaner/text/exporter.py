"""Clean text export for embedding-friendly output.

Responsibilities:
- Normalize Unicode to NFC so visually identical text is byte-identical.
- Trim every line and collapse blank-line runs to a single empty line.

The transformation is idempotent: exporting an exported text changes nothing.
"""

from __future__ import annotations

import unicodedata

from .lines import split_lines


def export_clean_text(text: str | None) -> str:
    """Return trimmed, NFC-normalized text with at most one blank line between lines.

    Leading and trailing blank lines are dropped; blank-only or non-string input
    yields an empty string.
    """

    if not isinstance(text, str) or not text.strip():
        return ""

    normalized = unicodedata.normalize("NFC", text)
    result: list[str] = []
    pending_blank = False
    for raw_line in split_lines(normalized):
        line = raw_line.strip()
        if not line:
            pending_blank = bool(result)
            continue
        if pending_blank:
            result.append("")
            pending_blank = False
        result.append(line)

    return "\n".join(result)
