"""
ghfetch — CLI entrypoint.

Usage:
    ghfetch --help
    ghfetch install grafana/k6
    ghfetch resolve cli/cli
    ghfetch assets cli/cli --os darwin --arch arm64
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from ghfetch import __version__
from ghfetch.core.observability.logging_config import setup_logging


def _env_debug() -> bool:
    return "1" in (os.environ.get("GHFETCH_DEBUG", ""), os.environ.get("DEBUG", ""))


@click.group()
@click.version_option(version=__version__, prog_name="ghfetch")
@click.option("--verbose", "-v", is_flag=True, help="Timestamped, per-module output.")
@click.option("--quiet", "-q", is_flag=True, help="Only show warnings and errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to config.yml (default: ~/.config/ghfetch/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """ghfetch — install the right binary from a GitHub release."""
    ctx.ensure_object(dict)
    debug = debug or _env_debug()
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    elif verbose:
        level = "INFO"
    else:
        level = os.environ.get("GHFETCH_LOG_LEVEL", "INFO")

    setup_logging(
        level=level,
        log_file=os.environ.get("GHFETCH_LOG_FILE"),
        log_file_level=os.environ.get("GHFETCH_LOG_FILE_LEVEL"),
        verbose=verbose,
    )


# ── Register commands from ghfetch/ui/cli/ ───────────────────────

from ghfetch.ui.cli.release import assets, install, resolve  # noqa: E402

cli.add_command(install)
cli.add_command(resolve)
cli.add_command(assets)


if __name__ == "__main__":
    cli()
