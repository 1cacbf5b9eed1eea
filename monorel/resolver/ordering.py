"""Dependency-first ordering of configured packages.

Packages are ordered with Kahn's algorithm. Among packages whose
dependencies are already placed, the one declared first goes next, so the
result is deterministic and unrelated packages keep their configured order.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Set
from typing import TYPE_CHECKING

from monorel.core.result import Err, Ok, Result
from monorel.resolver.errors import DependencyCycle

if TYPE_CHECKING:
    from monorel.core.config import PackageConfig
    from monorel.resolver.base import PackageEntry

__all__ = ["order_by_dependencies", "topological_order"]


def topological_order(
    names: list[str],
    dependencies: Mapping[str, Set[str]],
) -> Result[list[str], DependencyCycle]:
    """Order ``names`` so that every name follows its dependencies.

    Dependencies outside ``names`` and self-references are ignored.

    Returns:
        Ok(ordered names), or Err(DependencyCycle) naming one cycle.
    """
    known = set(names)
    deps = {
        name: {d for d in dependencies.get(name, ()) if d in known and d != name} for name in names
    }

    placed: set[str] = set()
    ordered: list[str] = []
    remaining = list(names)
    while remaining:
        ready = next((n for n in remaining if deps[n] <= placed), None)
        if ready is None:
            return Err(DependencyCycle(names=_find_cycle(remaining, deps)))
        ordered.append(ready)
        placed.add(ready)
        remaining.remove(ready)

    return Ok(ordered)


def _find_cycle(remaining: list[str], deps: Mapping[str, Set[str]]) -> tuple[str, ...]:
    # Every remaining node has an unplaced dependency, so walking always loops.
    pending = set(remaining)
    path: list[str] = []
    seen: dict[str, int] = {}
    node = remaining[0]
    while node not in seen:
        seen[node] = len(path)
        path.append(node)
        node = min(d for d in deps[node] if d in pending)
    return tuple(path[seen[node] :])


def order_by_dependencies(
    packages: list[PackageEntry],
    participates: Callable[[PackageConfig], bool],
    dependencies: Mapping[str, Set[str]],
) -> Result[None, DependencyCycle]:
    """Reorder participating entries of ``packages`` in place.

    Participating entries are rearranged among the positions they already
    occupy; all other entries stay where they are. On a cycle the list is
    left untouched.
    """
    slots = [i for i, (_, cfg) in enumerate(packages) if participates(cfg)]
    entries = {packages[i][0]: packages[i] for i in slots}

    result = topological_order([packages[i][0] for i in slots], dependencies)
    if isinstance(result, Err):
        return result

    for slot, name in zip(slots, result.value, strict=True):
        packages[slot] = entries[name]
    return Ok(None)
