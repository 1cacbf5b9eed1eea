from __future__ import annotations

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from monorel.cli.app import app
from monorel.core.errors import ErrorCode
from monorel.core.result import Ok, Result
from monorel.git.tags import GitError
from monorel.resolver import go as go_mod

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_git_tags(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_list_tags(root: Path) -> Result[list[str], GitError]:
        return Ok([])

    monkeypatch.setattr(go_mod, "list_tags", fake_list_tags)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    for name, requires in [("api", ["example.com/core"]), ("core", [])]:
        pkg = tmp_path / name
        pkg.mkdir()
        lines = [f"module example.com/{name}", "go 1.22"]
        lines += [f"require {r} v1.0.0" for r in requires]
        (pkg / "go.mod").write_text("\n".join(lines) + "\n")
        (pkg / "version.go").write_text(f'package {name}\n\nconst Version = "1.0.0"\n')
    (tmp_path / "go.work").write_text("go 1.22\n\nuse (\n\t./api\n\t./core\n)\n")
    (tmp_path / "monorel.toml").write_text(
        "[packages.api]\n"
        'path = "api"\n'
        'resolver = "go"\n\n'
        "[packages.core]\n"
        'path = "core"\n'
        'resolver = "go"\n\n'
        "[resolvers.go]\n"
        f"publish = [{{ command = {sys.executable!r}, args = ['-c', 'pass'] }}]\n"
    )
    return tmp_path


def test_list(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "list"])

    assert result.exit_code == 0, result.output
    assert "api 1.0.0 (api)" in result.output
    assert "core 1.0.0 (core)" in result.output


def test_order(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "order"])

    assert result.exit_code == 0, result.output
    assert result.output.index("1. core") < result.output.index("2. api")


def test_order_without_config(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--root", str(tmp_path), "order"])
    assert result.exit_code == int(ErrorCode.CONFIG_ERROR)


def test_bump(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "bump", "core", "v1.1.0"])

    assert result.exit_code == 0, result.output
    assert 'const Version = "1.1.0"' in (repo / "core" / "version.go").read_text()


def test_bump_dry_run(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "bump", "core", "2.0.0", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert 'const Version = "1.0.0"' in (repo / "core" / "version.go").read_text()


def test_bump_invalid_version(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "bump", "core", "1.x"])
    assert result.exit_code == int(ErrorCode.USER_ERROR)


def test_bump_unknown_package(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "bump", "nope", "1.0.0"])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert "Available: api, core" in result.output


def test_publish(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "publish", "core"])

    assert result.exit_code == 0, result.output
    assert "core 1.0.0 published" in result.output


def test_publish_dry_run_skips(repo: Path) -> None:
    result = runner.invoke(app, ["--root", str(repo), "publish", "core", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "due to dry run" in result.output
    assert "not published (dry run)" in result.output
    assert "core 1.0.0 published" not in result.output
