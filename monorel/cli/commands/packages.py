"""Package commands: list, order, bump, publish."""

from __future__ import annotations

import typer

from monorel.cli.context import CLIContext, get_context
from monorel.core.config import Config, PackageConfig
from monorel.core.errors import ErrorCode
from monorel.core.result import Err
from monorel.output.console import Style
from monorel.resolver import (
    CommandFailed,
    Context,
    ResolvedPackage,
    ResolveError,
    Resolver,
    all_kinds,
    get_resolver,
    parse_semver,
)


def _fail(cli: CLIContext, error: ResolveError) -> typer.Exit:
    cli.console.error(error.pretty())
    if isinstance(error, CommandFailed):
        return typer.Exit(code=int(ErrorCode.PUBLISH_ERROR))
    return typer.Exit(code=int(ErrorCode.RESOLVE_ERROR))


def _configured_package(
    cli: CLIContext, name: str
) -> tuple[Config, PackageConfig, Resolver, ResolvedPackage]:
    config = cli.require_config()
    pkg = config.package(name)
    if pkg is None:
        cli.console.error(f"Unknown package: {name}")
        known = [pkg_name for pkg_name, _ in config.packages]
        if known:
            cli.console.print(f"Available: {', '.join(known)}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    resolver = get_resolver(pkg.resolver, cli.console)
    resolved = resolver.resolve(cli.root, pkg)
    if isinstance(resolved, Err):
        raise _fail(cli, resolved.error)
    return config, pkg, resolver, resolved.value


def list_packages(ctx: typer.Context) -> None:
    """Discover packages of every ecosystem in the repository."""
    cli = get_context(ctx)
    for kind in all_kinds():
        result = get_resolver(kind, cli.console).resolve_all(cli.root)
        if isinstance(result, Err):
            raise _fail(cli, result.error)
        if not result.value:
            continue
        cli.console.header(str(kind))
        for package in result.value:
            cli.console.print(f"{package.name} {package.version} ({package.path.as_posix()})")


def order(ctx: typer.Context) -> None:
    """Print configured packages in publish order."""
    cli = get_context(ctx)
    config = cli.require_config()
    entries = config.package_entries()

    kinds = {pkg.resolver for _, pkg in entries}
    for kind in all_kinds():
        if kind not in kinds:
            continue
        result = get_resolver(kind, cli.console).sort_packages(cli.root, entries)
        if isinstance(result, Err):
            raise _fail(cli, result.error)

    for index, (name, pkg) in enumerate(entries, start=1):
        cli.console.print(f"{index}. {name} ({pkg.resolver})")


def bump(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Configured package name"),
    version: str = typer.Argument(..., help="New version, e.g. 1.4.0"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report without writing"),
) -> None:
    """Write a new version into a package's version source."""
    cli = get_context(ctx)
    parsed = parse_semver(version.removeprefix("v"))
    if isinstance(parsed, Err):
        cli.console.error(parsed.error.pretty())
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    _, _, resolver, package = _configured_package(cli, name)
    result = resolver.bump(Context(dry_run=dry_run), cli.root, package, parsed.value)
    if isinstance(result, Err):
        raise _fail(cli, result.error)
    if not dry_run:
        cli.console.success(f"{package.name}: {package.version} -> {parsed.value}")


def publish(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Configured package name"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Skip commands not marked dry_run"),
) -> None:
    """Run the prepublish and publish hooks of a package."""
    cli = get_context(ctx)
    config, pkg, resolver, package = _configured_package(cli, name)
    result = resolver.publish(
        package, config.resolver_config(pkg.resolver), dry_run, root=cli.root
    )
    if isinstance(result, Err):
        raise _fail(cli, result.error)
    if dry_run:
        cli.console.info(f"{package.name} {package.version} not published (dry run)")
    else:
        cli.console.success(f"{package.name} {package.version} published")
