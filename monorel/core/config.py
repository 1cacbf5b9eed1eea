"""Typed loading of ``monorel.toml``.

Example:

    [packages.auth]
    path = "auth"
    resolver = "go"
    version_mode = "semantic"
    assets = ["dist/auth.tar.gz"]

    [resolvers.go]
    prepublish = [{ command = "go", args = ["vet", "./..."] }]
    publish = [{ command = "git", args = ["push", "--tags"], dry_run = false }]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .result import Err, Ok, Result
from .structured import (
    StrDict,
    as_str_dict,
    get_bool,
    get_list,
    get_str,
    get_str_list,
    get_table,
)

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "HookCommand",
    "PackageConfig",
    "ResolverConfig",
    "ResolverKind",
    "VersionMode",
    "load_config",
]

CONFIG_FILENAME = "monorel.toml"


class ResolverKind(Enum):
    """Ecosystem a package belongs to."""

    GO = "go"

    def __str__(self) -> str:
        return self.value


class VersionMode(Enum):
    """How a package's next version is computed."""

    SEMANTIC = "semantic"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or is inconsistent."""

    message: str
    path: Path | None = None

    def pretty(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


@dataclass(frozen=True, slots=True)
class HookCommand:
    """A prepublish/publish command.

    Attributes:
        command: Executable name or path.
        args: Arguments, None when the config omits them.
        dry_run: When True the command also runs in dry-run mode.
    """

    command: str
    args: tuple[str, ...] | None = None
    dry_run: bool | None = None

    def argv(self) -> list[str]:
        return [self.command, *(self.args or ())]

    def display(self) -> str:
        return " ".join(self.argv())

    @property
    def runs_in_dry_run(self) -> bool:
        return self.dry_run is True


@dataclass(frozen=True, slots=True)
class PackageConfig:
    """One configured package, relative to the repository root."""

    path: Path
    resolver: ResolverKind
    version_mode: VersionMode = VersionMode.SEMANTIC
    assets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Hook command lists for one resolver kind."""

    prepublish: tuple[HookCommand, ...] = ()
    publish: tuple[HookCommand, ...] = ()


def _empty_resolvers() -> dict[ResolverKind, ResolverConfig]:
    return {}


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container.

    ``packages`` keeps declaration order; it is the default publish order
    before sorting.
    """

    packages: tuple[tuple[str, PackageConfig], ...] = ()
    resolvers: dict[ResolverKind, ResolverConfig] = field(default_factory=_empty_resolvers)

    def package(self, name: str) -> PackageConfig | None:
        for pkg_name, pkg in self.packages:
            if pkg_name == name:
                return pkg
        return None

    def package_entries(self) -> list[tuple[str, PackageConfig]]:
        """Return a fresh, mutable copy of the package list."""
        return list(self.packages)

    def resolver_config(self, kind: ResolverKind) -> ResolverConfig:
        return self.resolvers.get(kind, ResolverConfig())

    def validate(self, root: Path) -> Result[None, ConfigError]:
        """Check that every package path is an existing directory under root."""
        for name, pkg in self.packages:
            if pkg.path.is_absolute():
                return Err(ConfigError(f"package {name!r}: path must be relative", path=pkg.path))
            if not (root / pkg.path).is_dir():
                return Err(
                    ConfigError(f"package {name!r}: directory not found", path=root / pkg.path)
                )
        return Ok(None)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML.

        Raises:
            ValueError: On unknown enum values or malformed entries.
        """
        packages_table: StrDict = get_table(data, "packages") or {}
        resolvers_table: StrDict = get_table(data, "resolvers") or {}

        packages: list[tuple[str, PackageConfig]] = []
        for name, raw in packages_table.items():
            table = as_str_dict(raw)
            if table is None:
                raise ValueError(f"packages.{name} must be a table")
            packages.append((name, _package_from_table(name, table)))

        resolvers: dict[ResolverKind, ResolverConfig] = {}
        for kind_name, raw in resolvers_table.items():
            table = as_str_dict(raw)
            if table is None:
                raise ValueError(f"resolvers.{kind_name} must be a table")
            kind = ResolverKind(kind_name)
            resolvers[kind] = ResolverConfig(
                prepublish=_commands_from_list(table, "prepublish", kind_name),
                publish=_commands_from_list(table, "publish", kind_name),
            )

        return cls(packages=tuple(packages), resolvers=resolvers)


def _package_from_table(name: str, table: StrDict) -> PackageConfig:
    path = get_str(table, "path")
    if path is None:
        raise ValueError(f"packages.{name}.path is required")
    resolver = get_str(table, "resolver")
    if resolver is None:
        raise ValueError(f"packages.{name}.resolver is required")
    mode = get_str(table, "version_mode") or VersionMode.SEMANTIC.value
    assets = get_str_list(table, "assets") or []
    return PackageConfig(
        path=Path(path),
        resolver=ResolverKind(resolver),
        version_mode=VersionMode(mode),
        assets=tuple(assets),
    )


def _commands_from_list(table: StrDict, key: str, kind_name: str) -> tuple[HookCommand, ...]:
    items = get_list(table, key) or []
    commands: list[HookCommand] = []
    for index, raw in enumerate(items):
        entry = as_str_dict(raw)
        command = get_str(entry, "command") if entry is not None else None
        if entry is None or command is None:
            raise ValueError(f"resolvers.{kind_name}.{key}[{index}] needs a command")
        args = get_str_list(entry, "args")
        commands.append(
            HookCommand(
                command=command,
                args=tuple(args) if args is not None else None,
                dry_run=get_bool(entry, "dry_run"),
            )
        )
    return tuple(commands)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to monorel.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
