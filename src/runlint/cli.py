"""runlint CLI: structural linter for Markdown runbooks."""

import sys

import typer

from runlint import __version__

from .commands import check, init, refs
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"runlint {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="runlint",
    help="Check Markdown runbooks for structural consistency",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """runlint - check Markdown runbooks for structural consistency."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
        stream=sys.stderr,
    )
    set_output_context(OutputContext(console=console, json_mode=json_output))


app.command("check")(check)
app.command("init")(init)
app.command("refs")(refs)


if __name__ == "__main__":
    app()
