"""Semantic version values (SemVer 2.0.0).

Parsing and formatting only; precedence rules are out of scope.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from monorel.core.result import Err, Ok, Result
from monorel.resolver.errors import VersionFormatError

_SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text


def parse_semver(text: str) -> Result[SemVer, VersionFormatError]:
    """Parse ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``; no leading ``v``."""
    m = _SEMVER_RE.match(text)
    if m is None:
        return Err(VersionFormatError(version=text, reason="not a semantic version"))
    return Ok(
        SemVer(
            major=int(m.group(1)),
            minor=int(m.group(2)),
            patch=int(m.group(3)),
            prerelease=m.group(4),
            build=m.group(5),
        )
    )
