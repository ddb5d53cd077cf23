"""
L2 Resolver — Release asset catalog.

Projects tag inconsistently (``v1.2.3`` vs ``1.2.3``), so the catalog
is looked up under each tag variant in turn, prefixed form first.
The first variant whose release exists and has assets wins; a failed
or asset-less lookup just moves on to the next variant.
"""

from __future__ import annotations

import logging

from ghfetch.core.models.install import InstallConfig
from ghfetch.core.models.release import ReleaseAsset, ReleaseVersion
from ghfetch.core.services.release_install.errors import NotFoundError, ReleaseInstallError
from ghfetch.core.services.release_install.resolver.release_feed import (
    _fetch_json,
    release_by_tag_url,
)

logger = logging.getLogger(__name__)


def _parse_assets(payload: dict) -> list[ReleaseAsset]:
    """Typed assets in publication order; malformed and duplicate entries dropped."""
    assets: list[ReleaseAsset] = []
    seen: set[str] = set()
    for item in payload.get("assets") or []:
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        url = item.get("browser_download_url")
        if not name or not url or name in seen:
            continue
        seen.add(name)
        assets.append(ReleaseAsset(name=name, url=url))
    return assets


def fetch_release_assets(config: InstallConfig, version: ReleaseVersion) -> list[ReleaseAsset]:
    """Return the assets published under the first matching tag variant.

    Raises:
        NotFoundError: No variant yielded any asset.  ``details`` lists
            the tags tried and where to look next.
    """
    tried: list[str] = []
    for tag in version.tag_variants():
        tried.append(tag)
        url = release_by_tag_url(config.api_base, config.owner, config.repo, tag)
        logger.debug("Trying to fetch assets for tag: %s", tag)
        try:
            payload = _fetch_json(url)
        except ReleaseInstallError as exc:
            logger.debug("Failed to fetch release for tag %s: %s", tag, exc)
            continue

        assets = _parse_assets(payload)
        logger.debug("Found %d assets for tag %s", len(assets), tag)
        if assets:
            return assets

    raise NotFoundError(
        f"No assets found for version {version}",
        details=[
            f"Tags tried: {', '.join(tried)}",
            "This could be due to:",
            "  - Release has no binary assets",
            "  - Release is source-only",
            "  - Version doesn't exist",
            f"Check available releases at: {config.releases_page}",
        ],
    )
