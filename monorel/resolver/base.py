"""The ``Resolver`` contract implemented once per ecosystem.

A resolver discovers packages of its ecosystem, reads their current
versions, orders them for publishing, writes bumped versions back and runs
publish hooks. Shared code only ever talks to this interface; new
ecosystems are added by subclassing it and registering the subclass in
``monorel.resolver.registry``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monorel.core.config import PackageConfig, ResolverConfig, ResolverKind
    from monorel.core.result import Result
    from monorel.resolver.errors import ResolveError
    from monorel.resolver.model import Context, ResolvedPackage
    from monorel.resolver.semver import SemVer

__all__ = ["PackageEntry", "Resolver"]

type PackageEntry = tuple[str, PackageConfig]


class Resolver(ABC):
    """Abstract base class for ecosystem resolvers.

    Subclasses must define ``kind`` and the five operations below. Calls are
    expected in this order: ``resolve_all``, ``sort_packages``, then
    ``bump`` and ``publish`` per package. Nothing is cached between calls;
    every operation re-reads the manifests from disk.
    """

    kind: ResolverKind

    @abstractmethod
    def resolve(self, root: Path, package: PackageConfig) -> Result[ResolvedPackage, ResolveError]:
        """Resolve the package configured at ``root / package.path``.

        Returns:
            Ok(ResolvedPackage), or Err(FileOrDirNotFound) when the
            ecosystem manifest is missing.
        """
        ...

    @abstractmethod
    def resolve_all(self, root: Path) -> Result[list[ResolvedPackage], ResolveError]:
        """Discover and resolve every package of this ecosystem under ``root``.

        Returns an empty list when the ecosystem has no manifest at ``root``.
        Stops at the first package that fails to resolve.
        """
        ...

    @abstractmethod
    def bump(
        self,
        ctx: Context,
        root: Path,
        package: ResolvedPackage,
        version: SemVer,
    ) -> Result[None, ResolveError]:
        """Persist ``version`` as the package's current version.

        Writes nothing when ``ctx.dry_run`` is set.
        """
        ...

    @abstractmethod
    def sort_packages(self, root: Path, packages: list[PackageEntry]) -> Result[None, ResolveError]:
        """Reorder ``packages`` in place so dependencies come first.

        Only entries of this resolver's kind move; other entries keep their
        positions.
        """
        ...

    @abstractmethod
    def publish(
        self,
        package: ResolvedPackage,
        config: ResolverConfig,
        dry_run: bool,
        *,
        root: Path = Path("."),
    ) -> Result[None, ResolveError]:
        """Run the configured prepublish and publish commands for ``package``."""
        ...
