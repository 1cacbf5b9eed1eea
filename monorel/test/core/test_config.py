"""Tests for monorel.core.config module."""

from __future__ import annotations

from pathlib import Path

from monorel.core.config import (
    Config,
    HookCommand,
    PackageConfig,
    ResolverKind,
    VersionMode,
    load_config,
)
from monorel.core.result import Err, Ok

SAMPLE = """
[packages.core]
path = "core"
resolver = "go"

[packages.auth]
path = "services/auth"
resolver = "go"
version_mode = "semantic"
assets = ["dist/auth.tar.gz"]

[resolvers.go]
prepublish = [{ command = "go", args = ["vet", "./..."] }]
publish = [
    { command = "git", args = ["push", "--tags"] },
    { command = "echo", dry_run = true },
]
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "monorel.toml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_loads_packages_in_declaration_order(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, SAMPLE))

        assert isinstance(result, Ok)
        config = result.value
        assert [name for name, _ in config.packages] == ["core", "auth"]
        auth = config.package("auth")
        assert auth == PackageConfig(
            path=Path("services/auth"),
            resolver=ResolverKind.GO,
            version_mode=VersionMode.SEMANTIC,
            assets=("dist/auth.tar.gz",),
        )

    def test_loads_resolver_hooks(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, SAMPLE))

        assert isinstance(result, Ok)
        hooks = result.value.resolver_config(ResolverKind.GO)
        assert hooks.prepublish == (HookCommand("go", ("vet", "./..."), None),)
        assert hooks.publish[0].args == ("push", "--tags")
        assert hooks.publish[1] == HookCommand("echo", None, True)

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "monorel.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.path == tmp_path / "monorel.toml"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, "[packages\n"))

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_unknown_resolver_kind(self, tmp_path: Path) -> None:
        content = '[packages.x]\npath = "x"\nresolver = "cobol"\n'
        result = load_config(_write(tmp_path, content))

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_package_without_path(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, '[packages.x]\nresolver = "go"\n'))

        assert isinstance(result, Err)
        assert "packages.x.path" in result.error.message

    def test_hook_without_command(self, tmp_path: Path) -> None:
        content = "[resolvers.go]\npublish = [{ args = ['x'] }]\n"
        result = load_config(_write(tmp_path, content))

        assert isinstance(result, Err)
        assert "resolvers.go.publish[0]" in result.error.message


class TestConfig:
    def test_resolver_config_defaults_to_empty(self) -> None:
        hooks = Config().resolver_config(ResolverKind.GO)
        assert hooks.prepublish == ()
        assert hooks.publish == ()

    def test_package_entries_is_a_copy(self) -> None:
        config = Config(packages=(("a", PackageConfig(Path("a"), ResolverKind.GO)),))
        entries = config.package_entries()
        entries.clear()
        assert len(config.packages) == 1

    def test_validate_requires_existing_directories(self, tmp_path: Path) -> None:
        (tmp_path / "a").mkdir()
        config = Config(
            packages=(
                ("a", PackageConfig(Path("a"), ResolverKind.GO)),
                ("b", PackageConfig(Path("b"), ResolverKind.GO)),
            )
        )

        result = config.validate(tmp_path)

        assert isinstance(result, Err)
        assert "'b'" in result.error.message

    def test_validate_ok(self, tmp_path: Path) -> None:
        (tmp_path / "a").mkdir()
        config = Config(packages=(("a", PackageConfig(Path("a"), ResolverKind.GO)),))
        assert config.validate(tmp_path) == Ok(None)


class TestHookCommand:
    def test_argv_and_display(self) -> None:
        cmd = HookCommand("git", ("push", "--tags"))
        assert cmd.argv() == ["git", "push", "--tags"]
        assert cmd.display() == "git push --tags"

    def test_runs_in_dry_run_only_when_explicit(self) -> None:
        assert HookCommand("x").runs_in_dry_run is False
        assert HookCommand("x", dry_run=False).runs_in_dry_run is False
        assert HookCommand("x", dry_run=True).runs_in_dry_run is True
