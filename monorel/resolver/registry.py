"""Lookup of resolver implementations by ecosystem kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from monorel.core.config import ResolverKind
from monorel.resolver.go import GoResolver

if TYPE_CHECKING:
    from monorel.output.console import ConsoleProtocol
    from monorel.resolver.base import Resolver
    from monorel.resolver.publish import CommandRunner

__all__ = ["all_kinds", "get_resolver"]

type ResolverFactory = Callable[[ConsoleProtocol, CommandRunner | None], Resolver]

_FACTORIES: dict[ResolverKind, ResolverFactory] = {
    ResolverKind.GO: GoResolver,
}


def all_kinds() -> list[ResolverKind]:
    """Kinds with a registered resolver, in declaration order."""
    return [kind for kind in ResolverKind if kind in _FACTORIES]


def get_resolver(
    kind: ResolverKind,
    console: ConsoleProtocol,
    runner: CommandRunner | None = None,
) -> Resolver:
    """Create the resolver for ``kind``.

    Raises:
        KeyError: If no resolver is registered for ``kind``.
    """
    return _FACTORIES[kind](console, runner)
