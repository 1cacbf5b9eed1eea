"""Values exchanged between resolvers and the orchestration layer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from monorel.resolver.semver import SemVer


@dataclass(frozen=True, slots=True)
class ResolvedPackage:
    """A discovered package and its current version.

    Attributes:
        name: Short name, derived from the manifest's module identity.
        version: Current version (``0.0.0`` when nothing recorded one).
        path: Package directory relative to the repository root.
        private: Whether the package must not be published.
    """

    name: str
    version: SemVer
    path: Path
    private: bool = False


@dataclass(frozen=True, slots=True)
class Context:
    """Execution context passed down by the orchestration layer."""

    dry_run: bool = False
