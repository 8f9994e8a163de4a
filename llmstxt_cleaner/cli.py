"""Command-line interface for llmstxt-cleaner.

Responsibilities:
- Expose user-facing commands for cleaning llms.txt artifacts.
- Convert CLI arguments into `CleanerConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .cli_rendering import echo_run_summary, exit_with_command_error
from .config import CleanerConfig, ConfigLoader
from .errors import PipelineStageError
from .io.storage import load_input_text, save_output_text, validate_output_path
from .parsing import parse_threshold
from .pipeline import LlmsTextPipeline
from .telemetry.logger import RunLogger
from .version_check import compare_versions, fetch_latest_version

app = typer.Typer(
    name="llmstxt-cleaner",
    no_args_is_help=True,
    help="Clean llms.txt / llms-full.txt artifacts for language-model ingestion.",
)


class StageProgressIndicator:
    """Render deterministic per-stage progress lines for a command."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}"
        )


def _load_base_config(config_path: Path | None) -> CleanerConfig:
    """Load YAML config when requested, otherwise environment config."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the offending `LLMSTXT_*` variable.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    filter_english: bool | None,
    header_footer: bool | None,
    clean_export: bool | None,
    threshold: float | None,
) -> CleanerConfig:
    """Resolve effective config from the base config and explicit CLI overrides."""

    base = _load_base_config(config_file)
    resolved_threshold = base.threshold
    if threshold is not None:
        try:
            resolved_threshold = parse_threshold(threshold)
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=str(exc),
                hint="Pass a finite number via `--threshold`, e.g. `0.6`.",
            ) from exc

    return CleanerConfig(
        filter_english=base.filter_english if filter_english is None else filter_english,
        remove_headers_footers=(
            base.remove_headers_footers if header_footer is None else header_footer
        ),
        clean_export=base.clean_export if clean_export is None else clean_export,
        threshold=resolved_threshold,
        max_input_bytes=base.max_input_bytes,
    )


@app.command("clean")
def clean_command(
    input_path: Annotated[Path, typer.Argument(help="Input text file (llms.txt or llms-full.txt).")],
    output_path: Annotated[Path, typer.Argument(help="Output text file.")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with stage defaults."),
    ] = None,
    filter_english: Annotated[
        bool | None,
        typer.Option("--filter/--no-filter", help="Keep only English-looking lines."),
    ] = None,
    header_footer: Annotated[
        bool | None,
        typer.Option(
            "--header-footer/--no-header-footer",
            help="Remove lines repeated across most pages.",
        ),
    ] = None,
    clean_export: Annotated[
        bool | None,
        typer.Option(
            "--clean-export/--no-clean-export",
            help="Trim lines, collapse blank runs, and NFC-normalize.",
        ),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option("--threshold", help="Page fraction for header/footer detection."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite OUTPUT without asking."),
    ] = False,
) -> None:
    """Clean an llms.txt artifact and write the result to OUTPUT."""

    try:
        config = _resolve_command_config(
            config_file, filter_english, header_footer, clean_export, threshold
        )
        raw_text = load_input_text(input_path, config.max_input_bytes)
        validate_output_path(output_path, input_path)
    except Exception as exc:
        exit_with_command_error("clean", exc)

    if output_path.exists() and not force:
        confirmed = typer.confirm(f'Output file "{output_path}" exists. Overwrite?', default=False)
        if not confirmed:
            typer.echo("Aborted: output file not overwritten.")
            return

    try:
        progress = StageProgressIndicator(command_name="clean")
        pipeline = LlmsTextPipeline(
            run_logger=RunLogger(),
            stage_progress_callback=progress.on_stage_start,
        )
        result = pipeline.run(raw_text, config)
        save_output_text(output_path, result.text, input_path=input_path)
    except Exception as exc:
        exit_with_command_error("clean", exc)

    typer.echo(f"Processing complete. Output written to {output_path}")
    echo_run_summary(result)


@app.command("version-check")
def version_check_command() -> None:
    """Check whether a newer llmstxt-cleaner release is available."""

    try:
        latest = fetch_latest_version()
    except Exception as exc:
        exit_with_command_error("version-check", exc)

    typer.echo(compare_versions(__version__, latest))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
