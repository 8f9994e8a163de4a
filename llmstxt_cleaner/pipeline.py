"""Pipeline orchestration for llms.txt cleaning.

Responsibilities:
- Run the enabled stages in fixed order: header/footer removal, English
  filtering, then clean export.
- Emit stage telemetry and progress callbacks.
- Fall back to a stage's input when the stage fails unexpectedly.

Key types:
- `LlmsTextPipeline`: orchestration facade.
- `PipelineResult`: immutable record of one run's output and diagnostics.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .config import CleanerConfig
from .telemetry.logger import RunLogger
from .text.cleaners import CleanerRule, ExportCleanText, FilterEnglish, RemoveHeadersFooters
from .text.lines import split_lines


def _line_count(text: str) -> int:
    """Return the number of lines in text, counting empty text as zero lines."""

    return len(split_lines(text)) if text else 0


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Output text and diagnostics for one cleaning run.

    Attributes:
        text: Final cleaned text.
        applied_stages: Stages that transformed the text, in run order.
        skipped_stages: Enabled stages that left the text untouched on purpose.
        fallback_stages: Stages that failed and passed their input through.
        page_count: Pages seen by header/footer removal (0 when disabled).
        input_line_count: Lines in the input text.
        output_line_count: Lines in the output text.
    """

    text: str
    applied_stages: tuple[str, ...] = ()
    skipped_stages: tuple[str, ...] = ()
    fallback_stages: tuple[str, ...] = ()
    page_count: int = 0
    input_line_count: int = 0
    output_line_count: int = 0


class LlmsTextPipeline:
    """Coordinate the cleaning stages for a single text artifact."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> None:
        """Initialize optional runtime logging and progress reporting hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback

    def run(self, text: str, config: CleanerConfig | None = None) -> PipelineResult:
        """Clean `text` with the stages enabled in `config`."""

        config = config or CleanerConfig()
        config.validate()
        current = text if isinstance(text, str) else ""
        input_line_count = _line_count(current)

        header_rule = RemoveHeadersFooters(config.threshold)
        rules: dict[str, CleanerRule] = {
            "headers_footers": header_rule,
            "language": FilterEnglish(),
            "export": ExportCleanText(),
        }
        stages = config.enabled_stages()

        applied: list[str] = []
        skipped: list[str] = []
        fallbacks: list[str] = []
        for index, stage_name in enumerate(stages, start=1):
            self._on_stage_start(stage_name, index, len(stages))
            try:
                current = rules[stage_name].apply(current)
            except Exception as exc:
                self._on_stage_failure(stage_name, exc)
                fallbacks.append(stage_name)
                continue

            if stage_name == "headers_footers" and header_rule.last_skipped:
                skipped.append(stage_name)
                self._on_stage_skipped(stage_name, "single_page")
                continue
            applied.append(stage_name)
            self._on_stage_complete(stage_name, lines=_line_count(current))

        return PipelineResult(
            text=current,
            applied_stages=tuple(applied),
            skipped_stages=tuple(skipped),
            fallback_stages=tuple(fallbacks),
            page_count=header_rule.last_page_count,
            input_line_count=input_line_count,
            output_line_count=_line_count(current),
        )

    def _on_stage_start(self, stage_name: str, index: int, total: int) -> None:
        """Emit start events to stage progress callback and structured logger."""

        if self._stage_progress_callback is not None:
            self._stage_progress_callback(stage_name, index, total)
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)

    def _on_stage_complete(self, stage_name: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name, **context)

    def _on_stage_skipped(self, stage_name: str, reason: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_skipped(stage_name, reason)

    def _on_stage_failure(self, stage_name: str, exc: Exception) -> None:
        """Emit failure and fallback events, keeping exception details out of logs."""

        if self._run_logger is not None:
            self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            self._run_logger.log_stage_fallback(stage_name)
