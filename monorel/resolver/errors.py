"""Error types returned by resolvers.

All resolver operations return ``Err(ResolveError)`` rather than raising.
Each error carries the offending path (or names) and renders a
human-readable line through ``pretty()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "CommandFailed",
    "DependencyCycle",
    "FileOrDirNotFound",
    "ParseError",
    "ResolveError",
    "VersionFormatError",
]


@dataclass(frozen=True, slots=True)
class FileOrDirNotFound:
    """A required manifest or workspace file is absent."""

    path: Path

    def pretty(self) -> str:
        return f"file or directory not found: {self.path}"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Structural parse failure, or an I/O failure while reading/writing."""

    path: Path
    reason: str

    def pretty(self) -> str:
        return f"failed to parse {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class VersionFormatError:
    """A resolved version string is not a valid semantic version."""

    version: str
    reason: str

    def pretty(self) -> str:
        return f"invalid version {self.version!r}: {self.reason}"


@dataclass(frozen=True, slots=True)
class DependencyCycle:
    """Packages that depend on each other, directly or transitively."""

    names: tuple[str, ...]

    def pretty(self) -> str:
        return f"dependency cycle between packages: {', '.join(self.names)}"


@dataclass(frozen=True, slots=True)
class CommandFailed:
    """A prepublish/publish hook exited non-zero or could not start."""

    command: str
    returncode: int
    cwd: Path
    detail: str = ""

    def pretty(self) -> str:
        msg = f"command `{self.command}` failed in {self.cwd} (exit {self.returncode})"
        if self.detail:
            return f"{msg}: {self.detail}"
        return msg


type ResolveError = (
    FileOrDirNotFound | ParseError | VersionFormatError | DependencyCycle | CommandFailed
)
