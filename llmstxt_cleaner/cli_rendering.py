"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and run summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .pipeline import PipelineResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def _stage_list(stages: tuple[str, ...]) -> str:
    return ", ".join(stages) if stages else "none"


def echo_run_summary(result: PipelineResult) -> None:
    """Print page/line counters and stage outcomes for a cleaning run."""

    typer.echo(f"Pages: {result.page_count}")
    typer.echo(f"Lines: {result.input_line_count} -> {result.output_line_count}")
    typer.echo(f"Applied stages: {_stage_list(result.applied_stages)}")
    if result.skipped_stages:
        typer.echo(f"Skipped stages: {_stage_list(result.skipped_stages)}")
    if result.fallback_stages:
        typer.secho(
            f"Fallback stages (input passed through): {_stage_list(result.fallback_stages)}",
            fg=typer.colors.YELLOW,
        )
