"""Parsers for ``go.mod`` and ``go.work``.

Both formats are handled line by line. Each trimmed line is matched against
the directives below in order and the first match wins; lines that match
nothing are ignored.

    module example.com/org/widgets/auth

    go 1.22

    require example.com/org/widgets/core v1.4.0

    require (
        github.com/google/uuid v1.6.0
        golang.org/x/text v0.14.0 // indirect
    )
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from monorel.core.result import Err, Ok, Result
from monorel.resolver.errors import FileOrDirNotFound, ParseError

__all__ = [
    "GO_MOD",
    "GO_WORK",
    "Manifest",
    "Requirement",
    "WorkspaceManifest",
    "module_name",
    "parse_manifest",
    "parse_workspace",
    "read_manifest",
    "read_workspace",
]

GO_MOD = "go.mod"
GO_WORK = "go.work"

_COMMENT = "//"
_BLOCK_CLOSE = ")"

# module example.com/x, module "example.com/x", module example.com/x // Deprecated: ...
_MODULE_RE = re.compile(r'^module\s+["`]?([^\s"`]+)')
_GO_RE = re.compile(r"^go\s+([\d.]+)")
_REQUIRE_SINGLE_RE = re.compile(r"^require\s+(\S+)\s+(\S+)")
_REQUIRE_ENTRY_RE = re.compile(r"^(\S+)\s+(\S+)")
_USE_SINGLE_RE = re.compile(r"^use\s+(\S+)")
_USE_ENTRY_RE = re.compile(r"^(\S+)")


@dataclass(frozen=True, slots=True)
class Requirement:
    """A ``require`` entry. ``version`` is kept verbatim."""

    path: str
    version: str


@dataclass(frozen=True, slots=True)
class Manifest:
    """Parsed ``go.mod``.

    Attributes:
        module: Module identity (never empty).
        go_version: Value of the ``go`` directive, if any.
        requires: Requirements in declaration order.
    """

    module: str
    go_version: str | None = None
    requires: tuple[Requirement, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class WorkspaceManifest:
    """Parsed ``go.work``. ``use_dirs`` may contain duplicates."""

    go_version: str | None = None
    use_dirs: tuple[str, ...] = field(default_factory=tuple)


def parse_manifest(content: str, source_path: Path) -> Result[Manifest, ParseError]:
    """Parse ``go.mod`` content.

    Args:
        content: File content.
        source_path: Path reported in errors.

    Returns:
        Ok(Manifest), or Err(ParseError) when no ``module`` directive exists.
    """
    module = ""
    go_version: str | None = None
    requires: list[Requirement] = []
    in_block = False

    for raw in content.splitlines():
        line = raw.strip()

        if not line or line.startswith(_COMMENT):
            continue

        if m := _MODULE_RE.match(line):
            module = m.group(1)
            continue

        if m := _GO_RE.match(line):
            go_version = m.group(1)
            continue

        if line == "require (":
            in_block = True
            continue

        if line == _BLOCK_CLOSE and in_block:
            in_block = False
            continue

        if m := _REQUIRE_SINGLE_RE.match(line):
            requires.append(Requirement(path=m.group(1), version=m.group(2)))
            continue

        if in_block and (m := _REQUIRE_ENTRY_RE.match(line)):
            if not m.group(1).startswith(_COMMENT):
                requires.append(Requirement(path=m.group(1), version=m.group(2)))

    if not module:
        return Err(ParseError(path=source_path, reason="module directive not found in go.mod"))

    return Ok(Manifest(module=module, go_version=go_version, requires=tuple(requires)))


def parse_workspace(content: str, source_path: Path) -> WorkspaceManifest:
    """Parse ``go.work`` content.

    Uses the same grammar as ``go.mod`` with ``use <dir>`` entries. A file
    without ``use`` entries gives an empty member list. ``source_path`` is
    accepted for symmetry with ``parse_manifest``; this parser has no
    failure mode.
    """
    del source_path
    go_version: str | None = None
    use_dirs: list[str] = []
    in_block = False

    for raw in content.splitlines():
        line = raw.strip()

        if not line or line.startswith(_COMMENT):
            continue

        if m := _GO_RE.match(line):
            go_version = m.group(1)
            continue

        if line == "use (":
            in_block = True
            continue

        if line == _BLOCK_CLOSE and in_block:
            in_block = False
            continue

        if m := _USE_SINGLE_RE.match(line):
            use_dirs.append(m.group(1))
            continue

        if in_block and (m := _USE_ENTRY_RE.match(line)):
            entry = m.group(1)
            if entry != _BLOCK_CLOSE and not entry.startswith(_COMMENT):
                use_dirs.append(entry)

    return WorkspaceManifest(go_version=go_version, use_dirs=tuple(use_dirs))


def read_manifest(path: Path) -> Result[Manifest, FileOrDirNotFound | ParseError]:
    """Read and parse a ``go.mod`` file from disk."""
    if not path.is_file():
        return Err(FileOrDirNotFound(path=path))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(ParseError(path=path, reason=str(e)))
    return parse_manifest(content, path)


def read_workspace(path: Path) -> Result[WorkspaceManifest, FileOrDirNotFound | ParseError]:
    """Read and parse a ``go.work`` file from disk."""
    if not path.is_file():
        return Err(FileOrDirNotFound(path=path))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(ParseError(path=path, reason=str(e)))
    return Ok(parse_workspace(content, path))


def module_name(module: str) -> str:
    """Short package name: the last ``/`` segment of a module identity."""
    return module.rsplit("/", 1)[-1]
