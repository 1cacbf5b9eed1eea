from __future__ import annotations

import pytest

from monorel.core.result import Err, Ok
from monorel.resolver.semver import SemVer, parse_semver


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0.0.0", SemVer(0, 0, 0)),
        ("1.2.3", SemVer(1, 2, 3)),
        ("1.2.3-rc.1", SemVer(1, 2, 3, prerelease="rc.1")),
        ("1.2.3+build.7", SemVer(1, 2, 3, build="build.7")),
        ("10.20.30-alpha-1+sha.abc", SemVer(10, 20, 30, prerelease="alpha-1", build="sha.abc")),
    ],
)
def test_parse_valid(text: str, expected: SemVer) -> None:
    assert parse_semver(text) == Ok(expected)
    assert str(expected) == text


@pytest.mark.parametrize("text", ["v1.2.3", "1.2", "01.2.3", "1.2.3-01", "1.2.3-", ""])
def test_parse_invalid(text: str) -> None:
    result = parse_semver(text)

    assert isinstance(result, Err)
    assert result.error.version == text
