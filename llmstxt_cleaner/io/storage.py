"""Validated text file storage.

Responsibilities:
- Read a UTF-8 input document with existence, type, and size checks.
- Write cleaned output with owner-only permissions, refusing unsafe targets.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import PipelineStageError

OUTPUT_FILE_MODE = 0o600


def load_input_text(path: Path, max_bytes: int) -> str:
    """Load input text and map invalid inputs to `read` stage errors."""

    if not path.exists():
        raise PipelineStageError(
            stage="read",
            detail=f"Input file does not exist: `{path}`.",
            hint="Pass an existing text file as INPUT.",
        )
    if not path.is_file():
        raise PipelineStageError(
            stage="read",
            detail=f"Input path is not a file: `{path}`.",
        )

    size = path.stat().st_size
    if size > max_bytes:
        raise PipelineStageError(
            stage="read",
            detail=f"Input file exceeds the {max_bytes}-byte size limit ({size} bytes).",
            hint="Raise `max_input_bytes` in the config file or split the input.",
        )

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PipelineStageError(
            stage="read",
            detail=f"Input file `{path}` is not valid UTF-8 text.",
        ) from exc

    if not text.strip():
        raise PipelineStageError(stage="read", detail=f"Input file `{path}` is empty.")
    return text


def validate_output_path(path: Path, input_path: Path | None = None) -> None:
    """Reject output targets that are directories or the input file itself."""

    if path.is_dir():
        raise PipelineStageError(
            stage="write",
            detail=f"Output path is a directory: `{path}`.",
            hint="Pass a file path as OUTPUT.",
        )
    if input_path is not None and path.resolve() == input_path.resolve():
        raise PipelineStageError(
            stage="write",
            detail="Input and output paths must be different.",
        )


def save_output_text(path: Path, content: str, input_path: Path | None = None) -> Path:
    """Save cleaned text with mode 0o600 and return the final path."""

    validate_output_path(path, input_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)
    os.chmod(path, OUTPUT_FILE_MODE)
    return path
