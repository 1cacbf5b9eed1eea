from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from monorel.core.config import CONFIG_FILENAME, Config, load_config
from monorel.core.errors import ErrorCode
from monorel.core.result import Err
from monorel.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    console: ConsoleProtocol
    verbose: bool = False

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def require_config(self) -> Config:
        """Load and validate monorel.toml, exiting with CONFIG_ERROR on failure."""
        result = load_config(self.config_path)
        if isinstance(result, Err):
            self.console.error(result.error.pretty())
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

        config = result.value
        valid = config.validate(self.root)
        if isinstance(valid, Err):
            self.console.error(valid.error.pretty())
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        return config


def build_context(root: Path | None, verbose: bool) -> CLIContext:
    try:
        resolved = (root or Path.cwd()).expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --root: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not resolved.is_dir():
        typer.echo(f"error: --root '{resolved}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(root=resolved, console=RichConsole(verbose=verbose), verbose=verbose)


def get_context(ctx: typer.Context) -> CLIContext:
    obj = ctx.obj
    if isinstance(obj, CLIContext):
        return obj
    return build_context(None, verbose=False)
