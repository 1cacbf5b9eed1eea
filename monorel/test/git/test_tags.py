"""Tests for monorel.git.tags."""

from __future__ import annotations

from pathlib import Path

import pytest

from monorel.core.result import Err, Ok, Result
from monorel.git import tags as tags_mod
from monorel.platform.process import ProcessError


def test_list_tags_runs_sorted_listing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def fake_run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
        seen["cmd"] = cmd
        seen["cwd"] = cwd
        return Ok("v1.2.0\n\n  auth/v0.3.0  \nv1.1.0\n")

    monkeypatch.setattr(tags_mod, "run_process", fake_run)

    result = tags_mod.list_tags(tmp_path)

    assert result == Ok(["v1.2.0", "auth/v0.3.0", "v1.1.0"])
    assert seen["cmd"] == ["git", "tag", "--list", "--sort=-v:refname"]
    assert seen["cwd"] == tmp_path


def test_list_tags_maps_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fake_run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
        return Err(ProcessError(tuple(cmd), 128, "", "fatal: not a git repository\n"))

    monkeypatch.setattr(tags_mod, "run_process", fake_run)

    result = tags_mod.list_tags(tmp_path)

    assert isinstance(result, Err)
    assert result.error.command == "tag"
    assert result.error.message == "fatal: not a git repository"
    assert result.error.returncode == 128

