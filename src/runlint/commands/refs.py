"""Refs command implementation."""

from pathlib import Path

import typer

from ..config import ConfigError, load_config
from ..constants import CONFIG_FILE
from ..core import extract_references, parse_document
from ..models import ParseError, ReadFailure, Reference
from ..output import get_output_context
from ..services import read_document


def _describe(ref: Reference) -> str:
    if ref.substep is not None:
        return f"sub-step {ref.substep}"
    if ref.step is not None:
        return f"step {ref.step}"
    return ref.section.replace("_", " ")


def refs(
    path: Path = typer.Argument(..., help="Runbook file"),
    config_file: Path = typer.Option(
        Path(CONFIG_FILE), "--config", "-c", help="Path to runlint config file"
    ),
) -> None:
    """List bold **references** in a runbook."""
    ctx = get_output_context()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(2) from None

    content = read_document(path)
    if isinstance(content, ReadFailure):
        ctx.error(f"Cannot read {path}: {content.message}")
        raise typer.Exit(1)

    document = parse_document(content, config.parser)
    if isinstance(document, ParseError):
        ctx.error(f"Cannot parse {path}: {document}")
        raise typer.Exit(1)

    references = extract_references(document)

    if ctx.json_mode:
        ctx.print_json(
            {
                "source": str(path),
                "references": [r.model_dump(mode="json") for r in references],
            }
        )
        return

    if not references:
        ctx.print("[yellow]No references found[/yellow]")
        return
    ctx.report("\n".join(f"{_describe(r)}: {r.text}" for r in references))
