"""
L5 Orchestration — The install pipeline.

    resolve version → fetch catalog → match → score → download
        → extract → locate → install (→ user fallback) → verify

Every stage gets the same immutable ``InstallConfig``.  The scratch
directory for download and extraction lives exactly as long as one
run and is removed on every exit path, Ctrl-C included.
"""

from __future__ import annotations

import logging
import tempfile
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from ghfetch.core.models.install import InstallConfig, InstallOutcome, InstallTarget
from ghfetch.core.models.platform import PlatformSpec
from ghfetch.core.models.release import ReleaseAsset, ReleaseVersion, ScoredCandidate
from ghfetch.core.services.release_install.detection.tool_version import (
    find_on_path,
    get_binary_version,
)
from ghfetch.core.services.release_install.domain.asset_matching import asset_names, match_assets
from ghfetch.core.services.release_install.domain.asset_scoring import (
    score_assets,
    select_best_asset,
)
from ghfetch.core.services.release_install.domain.platform import build_platform_spec
from ghfetch.core.services.release_install.errors import InstallPermissionError, NotFoundError
from ghfetch.core.services.release_install.execution.download import download_asset
from ghfetch.core.services.release_install.execution.extract import extract_archive
from ghfetch.core.services.release_install.execution.install import (
    Installer,
    install_to_user_directory,
)
from ghfetch.core.services.release_install.execution.locate import locate_binary
from ghfetch.core.services.release_install.resolver.catalog import fetch_release_assets
from ghfetch.core.services.release_install.resolver.version_resolution import resolve_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetSelection:
    """Everything known about a release before anything is downloaded."""

    platform: PlatformSpec
    version: ReleaseVersion
    catalog: list[ReleaseAsset]
    candidates: list[ScoredCandidate]
    selected: ScoredCandidate


@contextmanager
def scratch_directory() -> Iterator[Path]:
    """Exclusive temporary workspace for one run's download + extraction."""
    with tempfile.TemporaryDirectory(prefix="ghfetch-") as tmp:
        logger.debug("Scratch directory: %s", tmp)
        yield Path(tmp)


def select_release_asset(config: InstallConfig, version: ReleaseVersion) -> AssetSelection:
    """Fetch the catalog for ``version`` and pick the asset to install.

    Raises:
        NotFoundError: No assets, or no asset survives filtering.
        NetworkError: The catalog could not be fetched.
    """
    platform = build_platform_spec(config.os, config.arch)

    logger.info("Fetching release assets...")
    catalog = fetch_release_assets(config, version)
    candidates = match_assets(catalog, platform, config.pattern)

    best = select_best_asset(candidates)
    if best is None:
        raise NotFoundError("No suitable asset found", details=asset_names(candidates))

    logger.info("Selected asset: %s", best.asset.name)
    return AssetSelection(
        platform=platform,
        version=version,
        catalog=catalog,
        candidates=score_assets(candidates),
        selected=best,
    )


def _install_with_fallback(
    binary: Path,
    config: InstallConfig,
    installer: Installer,
    outcome: InstallOutcome,
) -> None:
    target = InstallTarget(directory=config.install_dir, binary_name=config.binary_name)
    try:
        installed = installer.install(binary, target)
    except InstallPermissionError as exc:
        logger.warning("%s", exc.message)
        logger.warning("Falling back to user directory %s", config.user_bin_dir)
        installed, on_path = install_to_user_directory(
            binary, config.binary_name, config.user_bin_dir,
        )
        outcome.used_fallback = True
        if not on_path:
            outcome.warnings.append(f"{installed.parent} is not in your PATH")
    outcome.installed_path = str(installed)


def verify_installation(installed_path: str, binary_name: str) -> str | None:
    """Best-effort version check of the installed binary.  Never fatal."""
    version = get_binary_version(installed_path)
    if version is None:
        logger.warning("Could not verify %s (no version flag answered)", binary_name)
        return None

    logger.info("%s version %s is ready to use", binary_name, version)
    on_path = find_on_path(binary_name)
    if on_path is None:
        logger.warning("%s is not in PATH", binary_name)
    elif Path(on_path).resolve() != Path(installed_path).resolve():
        logger.warning("%s on PATH resolves to %s, not the new install", binary_name, on_path)
    else:
        logger.info("Location: %s", on_path)
    return version


def install_release(
    config: InstallConfig,
    *,
    installer: Installer | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> InstallOutcome:
    """Run the whole pipeline for ``config``.

    Returns:
        The outcome; ``already_installed`` is set when the binary was
        found on PATH and ``config.force`` is off (no version check).

    Raises:
        ReleaseInstallError: Any terminal pipeline failure.  A
            permission failure on the system directory is not terminal.
    """
    installer = installer or Installer()
    logger.info("Target system: %s/%s", config.os, config.arch)

    version = resolve_version(config)
    logger.info("Target version: %s", version)
    outcome = InstallOutcome(binary_name=config.binary_name, version=version.bare)

    existing = find_on_path(config.binary_name)
    if existing and not config.force:
        logger.warning("%s is already installed", config.binary_name)
        logger.info("Use --force to reinstall")
        outcome.already_installed = True
        outcome.installed_path = existing
        return outcome

    selection = select_release_asset(config, version)
    outcome.asset = selection.selected.asset.name

    with scratch_directory() as scratch:
        downloaded = download_asset(selection.selected.asset, scratch, sleep=sleep)
        extract_archive(Path(downloaded.local_path), scratch, config.binary_name)
        binary = locate_binary(scratch, config.binary_name, config.extracted_dir)
        logger.info("Found binary: %s", binary.relative_to(scratch).as_posix())
        _install_with_fallback(binary, config, installer, outcome)

    logger.info("Installation completed successfully%s", " (user directory)" if outcome.used_fallback else "")
    outcome.verified_version = verify_installation(outcome.installed_path, config.binary_name)
    return outcome
