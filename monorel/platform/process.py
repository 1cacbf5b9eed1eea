"""Subprocess execution returning ``Result`` values.

This is the only module that calls ``subprocess`` directly; git tag listing
and publish hooks both go through it.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from monorel.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run", "run_silent"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 when the process could not be started.
        stdout: Captured standard output (may be empty).
        stderr: Captured standard error, or the OS error message.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
    """Execute a command and capture its output.

    Returns:
        Ok(stdout) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_silent(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
    """Execute a command, letting its output stream to the terminal.

    Returns:
        Ok(None) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(cmd, cwd=str(cwd), check=False)
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, stdout="", stderr="")
        )

    return Ok(None)
