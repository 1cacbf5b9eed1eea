"""Go modules resolver.

Package identity comes from ``go.mod``; multi-module repositories list
their modules in a root ``go.work``. The current version of a module is
taken from the first source that has one:

1. a ``Version`` const/var in ``version.go`` inside the module directory
2. the highest git tag, preferring ``<module>/vX.Y.Z`` tags over bare ones
3. ``0.0.0``

Bumping rewrites (or creates) ``version.go``. Go has no registry upload
step, so publishing only runs the configured hook commands.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from monorel.core.config import PackageConfig, ResolverKind, VersionMode
from monorel.core.result import Err, Ok, Result
from monorel.git.tags import list_tags
from monorel.resolver.base import PackageEntry, Resolver
from monorel.resolver.errors import FileOrDirNotFound, ParseError, ResolveError
from monorel.resolver.gomod import (
    GO_MOD,
    GO_WORK,
    Manifest,
    module_name,
    read_manifest,
    read_workspace,
)
from monorel.resolver.model import Context, ResolvedPackage
from monorel.resolver.ordering import order_by_dependencies
from monorel.resolver.publish import CommandRunner, SubprocessRunner, run_hooks
from monorel.resolver.semver import SemVer, parse_semver

if TYPE_CHECKING:
    from monorel.core.config import ResolverConfig
    from monorel.output.console import ConsoleProtocol

__all__ = [
    "DEFAULT_VERSION",
    "VERSION_FILE",
    "GoResolver",
    "resolve_version",
    "version_from_file",
    "version_from_tags",
    "write_version",
]

VERSION_FILE = "version.go"
DEFAULT_VERSION = "0.0.0"

_SEMVER = r"\d+\.\d+\.\d+(?:-[a-zA-Z0-9.-]+)?(?:\+[a-zA-Z0-9.-]+)?"

# const Version = "1.2.3", var VERSION = "v1.2.3-rc.1", ...
_VERSION_DECL_RE = re.compile(rf'(?i)(?:const|var)\s+version\s*=\s*"v?({_SEMVER})"')
_VERSION_LITERAL_RE = re.compile(rf'(?i)((?:const|var)\s+version\s*=\s*")v?{_SEMVER}(")')
_TAG_RE = re.compile(rf"^v?({_SEMVER})$")
_PACKAGE_CLAUSE_RE = re.compile(r"^package\s+(\w+)", re.MULTILINE)

_VERSION_FILE_TEMPLATE = """\
package {package}

// Version is the current version of the module.
const Version = "{version}"
"""


def version_from_file(package_dir: Path) -> Result[str | None, ParseError]:
    """Read the version declared in ``package_dir/version.go``.

    Returns:
        Ok(version) when an assignment matches, Ok(None) when the file is
        missing or declares no version, Err(ParseError) if it can't be read.
    """
    path = package_dir / VERSION_FILE
    if not path.is_file():
        return Ok(None)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(ParseError(path=path, reason=str(e)))

    m = _VERSION_DECL_RE.search(content)
    return Ok(m.group(1) if m else None)


def _match_tag(tag: str, prefix: str | None) -> str | None:
    if prefix is not None:
        if not tag.startswith(prefix):
            return None
        tag = tag[len(prefix) :]
    m = _TAG_RE.match(tag)
    return m.group(1) if m else None


def version_from_tags(root: Path, module: str, package_path: Path = Path(".")) -> str | None:
    """Find the module's version among the repository's git tags.

    Tags are scanned in git's descending version order. ``<module>/<semver>``
    tags win, then ``<package_path>/<semver>`` tags for sub-directories,
    then bare ``<semver>`` tags. Any git failure counts as "no tag".
    """
    tags = list_tags(root)
    if isinstance(tags, Err):
        return None

    prefixes: list[str | None] = [f"{module}/"]
    if package_path != Path("."):
        prefixes.append(f"{package_path.as_posix()}/")
    prefixes.append(None)

    for prefix in prefixes:
        for tag in tags.value:
            version = _match_tag(tag, prefix)
            if version is not None:
                return version
    return None


def resolve_version(
    root: Path,
    package_path: Path,
    module: str,
    console: ConsoleProtocol,
) -> Result[str, ParseError]:
    """Resolve the current version of ``module`` located at ``root / package_path``."""
    from_file = version_from_file(root / package_path)
    if isinstance(from_file, Err):
        return from_file
    if from_file.value is not None:
        console.debug(f"Found version {from_file.value} from {VERSION_FILE}")
        return Ok(from_file.value)

    from_tag = version_from_tags(root, module, package_path)
    if from_tag is not None:
        console.debug(f"Found version {from_tag} from git tag")
        return Ok(from_tag)

    console.debug(f"Using default version {DEFAULT_VERSION}")
    return Ok(DEFAULT_VERSION)


def _package_clause(package_dir: Path) -> str:
    for source in sorted(package_dir.glob("*.go")):
        if source.name.endswith("_test.go"):
            continue
        try:
            m = _PACKAGE_CLAUSE_RE.search(source.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            continue
        if m:
            return m.group(1)
    return "main"


def write_version(
    package_dir: Path,
    version: str,
    console: ConsoleProtocol,
) -> Result[None, ParseError]:
    """Persist ``version`` into ``package_dir/version.go``.

    Creates the file when missing, using the package clause of a sibling
    ``.go`` file (``main`` if there is none). Otherwise only the first
    version literal is replaced; every other byte is kept. An existing file
    without a ``const``/``var Version = "..."`` assignment (including the
    parenthesized ``const ( ... )`` form) is left untouched and reported as
    a ParseError.
    """
    path = package_dir / VERSION_FILE
    try:
        if not path.exists():
            content = _VERSION_FILE_TEMPLATE.format(
                package=_package_clause(package_dir), version=version
            )
            path.write_bytes(content.encode("utf-8"))
            console.info(f"Created {path} with version {version}")
            return Ok(None)

        content = path.read_bytes().decode("utf-8")
        updated, count = _VERSION_LITERAL_RE.subn(
            lambda m: f"{m.group(1)}{version}{m.group(2)}", content, count=1
        )
        if count == 0:
            return Err(ParseError(path=path, reason="no Version const/var assignment found"))
        path.write_bytes(updated.encode("utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ParseError(path=path, reason=str(e)))

    console.info(f"Updated {path} to version {version}")
    return Ok(None)


def _normalize_member(entry: str) -> Path:
    while entry.startswith("./"):
        entry = entry[2:]
    return Path(entry or ".")


class GoResolver(Resolver):
    """Resolver for Go modules and ``go.work`` workspaces.

    Args:
        console: Receives debug/info/warning diagnostics.
        runner: Executes publish hooks (subprocesses by default).
    """

    kind = ResolverKind.GO

    def __init__(
        self,
        console: ConsoleProtocol,
        runner: CommandRunner | None = None,
    ) -> None:
        self.console = console
        self.runner: CommandRunner = runner or SubprocessRunner()

    def resolve(self, root: Path, package: PackageConfig) -> Result[ResolvedPackage, ResolveError]:
        manifest_path = root / package.path / GO_MOD
        if not manifest_path.exists():
            return Err(FileOrDirNotFound(path=manifest_path))

        manifest = read_manifest(manifest_path)
        if isinstance(manifest, Err):
            return manifest
        module = manifest.value.module

        version_str = resolve_version(root, package.path, module, self.console)
        if isinstance(version_str, Err):
            return version_str

        version = parse_semver(version_str.value)
        if isinstance(version, Err):
            return version

        return Ok(
            ResolvedPackage(
                name=module_name(module),
                version=version.value,
                path=package.path,
                private=False,
            )
        )

    def resolve_all(self, root: Path) -> Result[list[ResolvedPackage], ResolveError]:
        work_path = root / GO_WORK
        if work_path.exists():
            workspace = read_workspace(work_path)
            if isinstance(workspace, Err):
                return workspace

            members: list[Path] = []
            for entry in workspace.value.use_dirs:
                member = _normalize_member(entry)
                if member not in members:
                    members.append(member)
            return self._resolve_paths(root, members)

        if not (root / GO_MOD).exists():
            self.console.warning(f"Cannot resolve package in {root}, {GO_MOD} not found.")
            return Ok([])

        return self._resolve_paths(root, [Path(".")])

    def _resolve_paths(
        self, root: Path, paths: list[Path]
    ) -> Result[list[ResolvedPackage], ResolveError]:
        packages: list[ResolvedPackage] = []
        for path in paths:
            config = PackageConfig(path=path, resolver=self.kind, version_mode=VersionMode.SEMANTIC)
            result = self.resolve(root, config)
            if isinstance(result, Err):
                return result
            packages.append(result.value)
        return Ok(packages)

    def bump(
        self,
        ctx: Context,
        root: Path,
        package: ResolvedPackage,
        version: SemVer,
    ) -> Result[None, ResolveError]:
        if ctx.dry_run:
            self.console.warning(
                f"Skip bump for {package.name} to version {version} due to dry run"
            )
            return Ok(None)
        return write_version(root / package.path, str(version), self.console)

    def sort_packages(self, root: Path, packages: list[PackageEntry]) -> Result[None, ResolveError]:
        manifests: dict[str, Manifest] = {}
        for name, config in packages:
            if config.resolver != self.kind:
                continue
            manifest = read_manifest(root / config.path / GO_MOD)
            if isinstance(manifest, Err):
                return manifest
            manifests[name] = manifest.value

        module_to_name = {m.module: name for name, m in manifests.items()}
        dependencies = {
            name: {module_to_name[req.path] for req in m.requires if req.path in module_to_name}
            for name, m in manifests.items()
        }

        return order_by_dependencies(
            packages, lambda config: config.resolver == self.kind, dependencies
        )

    def publish(
        self,
        package: ResolvedPackage,
        config: ResolverConfig,
        dry_run: bool,
        *,
        root: Path = Path("."),
    ) -> Result[None, ResolveError]:
        return run_hooks(
            package, config, dry_run, root=root, runner=self.runner, console=self.console
        )
