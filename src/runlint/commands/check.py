"""Check command implementation."""

from pathlib import Path

import typer

from ..config import ConfigError, ReportFormat, load_config
from ..constants import CONFIG_FILE
from ..core import check_paths, render_outcomes
from ..output import get_output_context
from ..services import discover_documents


def check(
    paths: list[Path] = typer.Argument(..., help="Runbook files or directories to check"),
    report_format: ReportFormat | None = typer.Option(
        None, "--format", "-f", help="Report format (defaults to config, or json with --json)"
    ),
    fail_on_warnings: bool | None = typer.Option(
        None,
        "--fail-on-warnings/--no-fail-on-warnings",
        help="Exit non-zero when only warnings are found",
    ),
    config_file: Path = typer.Option(
        Path(CONFIG_FILE), "--config", "-c", help="Path to runlint config file"
    ),
    workers: int | None = typer.Option(
        None, "--workers", "-w", min=1, help="Documents checked in parallel"
    ),
) -> None:
    """Check runbook structure and print a report."""
    ctx = get_output_context()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(2) from None

    report_cfg = config.report
    if report_format is not None:
        report_cfg = report_cfg.model_copy(update={"format": report_format})
    elif ctx.json_mode:
        report_cfg = report_cfg.model_copy(update={"format": ReportFormat.JSON})
    if fail_on_warnings is not None:
        report_cfg = report_cfg.model_copy(update={"fail_on_warnings": fail_on_warnings})

    documents: list[Path] = []
    seen: set[Path] = set()
    for target in paths:
        try:
            found = discover_documents(target, config.batch.pattern)
        except FileNotFoundError as e:
            ctx.error(str(e))
            raise typer.Exit(2) from None
        for path in found:
            resolved = path.resolve()
            if resolved not in seen:
                seen.add(resolved)
                documents.append(path)

    if not documents:
        ctx.error(f"No documents matching '{config.batch.pattern}' found")
        raise typer.Exit(2)

    outcomes = check_paths(documents, config, workers or config.batch.max_workers)
    report, exit_code = render_outcomes(outcomes, report_cfg)
    ctx.report(report)

    if exit_code:
        raise typer.Exit(exit_code)
