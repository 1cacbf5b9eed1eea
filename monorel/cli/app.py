from __future__ import annotations

from pathlib import Path

import typer

from monorel import __version__
from monorel.cli.commands.packages import bump, list_packages, order, publish
from monorel.cli.context import build_context


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("list")(list_packages)
app.command()(order)
app.command()(bump)
app.command()(publish)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    root: Path | None = typer.Option(None, "--root", help="Repository root (default: cwd)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    ctx.obj = build_context(root, verbose)


def main() -> None:
    app()
