"""Package resolvers.

Usage:
    from monorel.resolver import Context, get_resolver

    resolver = get_resolver(ResolverKind.GO, console)
    packages = resolver.resolve_all(root)
"""

from monorel.resolver.base import PackageEntry, Resolver
from monorel.resolver.errors import (
    CommandFailed,
    DependencyCycle,
    FileOrDirNotFound,
    ParseError,
    ResolveError,
    VersionFormatError,
)
from monorel.resolver.go import GoResolver
from monorel.resolver.model import Context, ResolvedPackage
from monorel.resolver.registry import all_kinds, get_resolver
from monorel.resolver.semver import SemVer, parse_semver

__all__ = [
    # base
    "PackageEntry",
    "Resolver",
    # errors
    "CommandFailed",
    "DependencyCycle",
    "FileOrDirNotFound",
    "ParseError",
    "ResolveError",
    "VersionFormatError",
    # implementations
    "GoResolver",
    "all_kinds",
    "get_resolver",
    # model
    "Context",
    "ResolvedPackage",
    "SemVer",
    "parse_semver",
]
