"""Git tag listing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from monorel.core.result import Err, Ok, Result
from monorel.platform.process import run as run_process

__all__ = ["GitError", "list_tags"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code (-1 if git could not be started)
    """

    command: str
    message: str
    returncode: int = 1


def list_tags(root: Path) -> Result[list[str], GitError]:
    """List every tag in the repository, highest version first.

    Runs ``git tag --list --sort=-v:refname`` in ``root``.

    Returns:
        Ok(tags) with blank lines removed, Err(GitError) if git is missing
        or exits non-zero.
    """
    result = run_process(
        ["git", "tag", "--list", "--sort=-v:refname"],
        cwd=root,
    )
    match result:
        case Err(e):
            return Err(
                GitError(
                    command="tag",
                    message=e.stderr.strip() or "git tag failed",
                    returncode=e.returncode,
                )
            )
        case Ok(stdout):
            return Ok([line.strip() for line in stdout.splitlines() if line.strip()])
