"""Prepublish/publish hook execution.

Commands run through an injected ``CommandRunner`` so the orchestration is
testable without spawning processes.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from monorel.core.result import Err, Ok, Result
from monorel.platform.process import ProcessError, run_silent
from monorel.resolver.errors import CommandFailed

if TYPE_CHECKING:
    from monorel.core.config import HookCommand, ResolverConfig
    from monorel.output.console import ConsoleProtocol
    from monorel.resolver.model import ResolvedPackage

__all__ = ["CommandRunner", "SubprocessRunner", "run_hooks"]


class CommandRunner(Protocol):
    def execute(self, command: HookCommand, cwd: Path) -> Result[None, ProcessError]: ...


class SubprocessRunner:
    """Runs hook commands as child processes with inherited stdio."""

    def execute(self, command: HookCommand, cwd: Path) -> Result[None, ProcessError]:
        return run_silent(command.argv(), cwd=cwd)


def _run_list(
    stage: str,
    commands: Sequence[HookCommand],
    *,
    cwd: Path,
    dry_run: bool,
    runner: CommandRunner,
    console: ConsoleProtocol,
) -> Result[None, CommandFailed]:
    for command in commands:
        if dry_run and not command.runs_in_dry_run:
            console.warning(f"Skip {stage} command {command.display()} due to dry run")
            continue
        console.info(f"Running {command.display()}")
        result = runner.execute(command, cwd)
        if isinstance(result, Err):
            return Err(
                CommandFailed(
                    command=command.display(),
                    returncode=result.error.returncode,
                    cwd=cwd,
                    detail=result.error.stderr.strip(),
                )
            )
    return Ok(None)


def run_hooks(
    package: ResolvedPackage,
    config: ResolverConfig,
    dry_run: bool,
    *,
    root: Path,
    runner: CommandRunner,
    console: ConsoleProtocol,
) -> Result[None, CommandFailed]:
    """Run prepublish then publish commands in the package directory.

    Under dry run a command is skipped (with a warning) unless it sets
    ``dry_run = true``. The first failing command aborts the run.
    """
    cwd = root / package.path

    console.info(f"Running prepublish commands for {package.name}")
    result = _run_list(
        "prepublish", config.prepublish, cwd=cwd, dry_run=dry_run, runner=runner, console=console
    )
    if isinstance(result, Err):
        return result

    console.info(f"Running publish commands for {package.name}")
    return _run_list(
        "publish", config.publish, cwd=cwd, dry_run=dry_run, runner=runner, console=console
    )
