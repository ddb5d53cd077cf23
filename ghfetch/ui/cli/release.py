"""
CLI commands for release installs.

Thin wrappers over ``ghfetch.core.services.release_install``.
Human-readable output goes to stderr; stdout only ever carries the
command's single result (a version, a path, or JSON).
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any, NoReturn

import click

from ghfetch.core.config.loader import ConfigError, build_install_config, load_defaults
from ghfetch.core.models.install import InstallConfig, InstallOutcome
from ghfetch.core.services.release_install.errors import ReleaseInstallError


def _fail(message: str, details: list[str] | None = None) -> NoReturn:
    click.secho(f"❌ {message}", fg="red", err=True)
    for line in details or []:
        click.echo(f"   {line}", err=True)
    sys.exit(1)


def _build_config(ctx: click.Context, repository: str, **options: Any) -> InstallConfig:
    try:
        defaults = load_defaults(ctx.obj.get("config_path"))
        return build_install_config(repository, defaults=defaults, **options)
    except ConfigError as exc:
        _fail(str(exc))
    except ReleaseInstallError as exc:
        _fail(exc.message, exc.details)


def _target_options(func: Callable) -> Callable:
    """Options shared by every command that picks an asset."""
    options = [
        click.option("--binary", "binary_name", default=None, help="Binary name (default: repository name)."),
        click.option("--version", "version", default=None, help="Release version (default: latest)."),
        click.option("--os", "os_name", default=None, help="Override OS detection (linux, darwin, windows)."),
        click.option("--arch", "arch", default=None, help="Override architecture detection (amd64, arm64, ...)."),
        click.option("--pattern", default=None, help="Substring required in the asset name (e.g. 'extended')."),
        click.option("--git-server", default=None, help="Git server hosting the releases (default: github.com)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# ── Install ─────────────────────────────────────────────────────


def _report_install(config: InstallConfig, outcome: InstallOutcome) -> None:
    if outcome.already_installed:
        click.secho(f"⚠️  {config.binary_name} is already installed", fg="yellow", err=True)
        return
    where = " (user directory)" if outcome.used_fallback else ""
    click.secho(f"✅ Installed {config.binary_name} {outcome.version}{where}", fg="green", err=True)
    for warn in outcome.warnings:
        click.secho(f"⚠️  {warn}", fg="yellow", err=True)


@click.command()
@click.argument("repository", metavar="OWNER/REPO")
@_target_options
@click.option("--extracted-dir", default=None, help="Directory inside the archive that holds the binary.")
@click.option("--install-dir", default=None, help="Install directory (default: /usr/local/bin).")
@click.option("--force", is_flag=True, help="Reinstall even if the binary is already on PATH.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Print the outcome as JSON on stdout.")
@click.pass_context
def install(ctx: click.Context, repository: str, as_json: bool, **options: Any) -> None:
    """Download and install the release binary for this platform."""
    from ghfetch.core.services.release_install.orchestration.orchestrator import install_release

    config = _build_config(ctx, repository, **options)
    try:
        outcome = install_release(config)
    except ReleaseInstallError as exc:
        _fail(exc.message, exc.details)

    if as_json:
        click.echo(json.dumps(outcome.to_dict(), indent=2))
        return

    if not ctx.obj.get("quiet"):
        _report_install(config, outcome)

    if outcome.installed_path:
        click.echo(outcome.installed_path)


# ── Resolve ─────────────────────────────────────────────────────


@click.command()
@click.argument("repository", metavar="OWNER/REPO")
@click.option("--version", "version", default=None, help="Version to normalise (default: latest).")
@click.option("--git-server", default=None, help="Git server hosting the releases (default: github.com).")
@click.pass_context
def resolve(ctx: click.Context, repository: str, version: str | None, git_server: str | None) -> None:
    """Print the resolved release version (without the 'v' prefix)."""
    from ghfetch.core.services.release_install.resolver.version_resolution import resolve_version

    config = _build_config(ctx, repository, version=version, git_server=git_server)
    try:
        resolved = resolve_version(config)
    except ReleaseInstallError as exc:
        _fail(exc.message, exc.details)

    click.echo(resolved.bare)


# ── Assets (dry run) ────────────────────────────────────────────


@click.command()
@click.argument("repository", metavar="OWNER/REPO")
@_target_options
@click.option("--all", "show_all", is_flag=True, help="Also list every asset in the release.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def assets(ctx: click.Context, repository: str, show_all: bool, as_json: bool, **options: Any) -> None:
    """Show which asset would be installed, without downloading it."""
    from ghfetch.core.services.release_install.orchestration.orchestrator import (
        select_release_asset,
    )
    from ghfetch.core.services.release_install.resolver.version_resolution import resolve_version

    config = _build_config(ctx, repository, **options)
    try:
        selection = select_release_asset(config, resolve_version(config))
    except ReleaseInstallError as exc:
        _fail(exc.message, exc.details)

    if as_json:
        click.echo(json.dumps({
            "repository": config.repository,
            "version": selection.version.bare,
            "platform": selection.platform.label,
            "selected": selection.selected.asset.model_dump(),
            "candidates": [
                {"name": c.asset.name, "score": c.score} for c in selection.candidates
            ],
            "catalog": [a.name for a in selection.catalog] if show_all else None,
        }, indent=2))
        return

    click.secho(
        f"📦 {config.repository} {selection.version} for {selection.platform.label}",
        fg="cyan", bold=True, err=True,
    )
    if show_all:
        click.echo(f"   All assets ({len(selection.catalog)}):", err=True)
        for asset in selection.catalog:
            click.echo(f"     • {asset.name}", err=True)
    click.echo(f"   Candidates ({len(selection.candidates)}):", err=True)
    for cand in selection.candidates:
        marker = " ← selected" if cand.asset == selection.selected.asset else ""
        click.echo(f"     {cand.score:>3}  {cand.asset.name}{marker}", err=True)

    click.echo(selection.selected.asset.url)
