"""Tests for monorel.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from monorel.core.result import Err, Ok
from monorel.platform.process import ProcessError, run, run_silent


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(("git", "tag"), 128, "", "fatal: not a git repository")
        assert str(error) == "git tag failed (exit 128)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(("git", "tag", "--list", "--sort=-v:refname"), 1, "", "")
        assert str(error) == "git tag --list ... failed (exit 1)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "hello" in result.value

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert "bad" in result.error.stderr

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.stderr

    def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "marker.txt").write_text("x")

        result = run([sys.executable, "-c", "import os; print(os.listdir('.'))"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "marker.txt" in result.value


class TestRunSilent:
    def test_success(self, tmp_path: Path) -> None:
        assert run_silent([sys.executable, "-c", "pass"], cwd=tmp_path) == Ok(None)

    def test_failure(self, tmp_path: Path) -> None:
        result = run_silent([sys.executable, "-c", "raise SystemExit(5)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 5

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run_silent(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
