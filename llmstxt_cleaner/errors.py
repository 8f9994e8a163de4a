"""Exception types shared by the cleaner CLI and its helpers."""

from __future__ import annotations

COMMAND_STAGES = ("config", "read", "write")


class CleanerError(RuntimeError):
    """Base class for llmstxt-cleaner failures reported to the user."""


class PipelineStageError(CleanerError):
    """Raised when reading config, reading input, or writing output fails.

    `stage` names the command phase, one of `COMMAND_STAGES`. Cleaning stages
    never raise this; they fall back to their input instead.
    """

    def __init__(self, *, stage: str, detail: str, hint: str | None = None) -> None:
        if stage not in COMMAND_STAGES:
            raise ValueError(f"Unknown command stage `{stage}`.")
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class VersionCheckError(CleanerError):
    """Raised when the latest published release cannot be determined."""
