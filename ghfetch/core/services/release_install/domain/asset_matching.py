"""
L1 Domain — Asset filtering (pure).

Three passes narrow the release catalog down to the candidates for
the target platform:

    1. OS pass           — any OS pattern, case-insensitive
    2. Architecture pass — any arch pattern, case-insensitive
    3. Pattern pass      — the user's substring, case-sensitive (optional)

Each pass returns a new list and never touches its input.  A pass
that empties the list raises ``NotFoundError`` carrying the names the
pass started from, so the user can see what was there before it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ghfetch.core.models.platform import PlatformSpec
from ghfetch.core.models.release import ReleaseAsset
from ghfetch.core.services.release_install.errors import NotFoundError

logger = logging.getLogger(__name__)


def _matches_any(name: str, patterns: Iterable[str]) -> str | None:
    """Return the first pattern found in ``name`` (case-insensitive)."""
    lower = name.lower()
    for pattern in patterns:
        if pattern.lower() in lower:
            return pattern
    return None


def filter_by_patterns(
    assets: Sequence[ReleaseAsset],
    patterns: Sequence[str],
    *,
    label: str = "",
) -> list[ReleaseAsset]:
    """Keep assets whose name contains any of ``patterns``."""
    kept: list[ReleaseAsset] = []
    for asset in assets:
        hit = _matches_any(asset.name, patterns)
        if hit is not None:
            logger.debug("Matched %s pattern '%s' in asset: %s", label, hit, asset.name)
            kept.append(asset)
    return kept


def filter_by_substring(assets: Sequence[ReleaseAsset], substring: str) -> list[ReleaseAsset]:
    """Keep assets whose name contains ``substring`` exactly."""
    return [a for a in assets if substring in a.name]


def asset_names(assets: Iterable[ReleaseAsset]) -> list[str]:
    return [a.name for a in assets]


def match_assets(
    assets: Sequence[ReleaseAsset],
    platform: PlatformSpec,
    pattern: str | None = None,
) -> list[ReleaseAsset]:
    """Run all filter passes and return the surviving candidates.

    Raises:
        NotFoundError: When any pass leaves no asset.  ``details`` holds
            the asset names available before that pass.
    """
    logger.debug("Filtering assets by OS patterns: %s", " ".join(platform.os_patterns))
    by_os = filter_by_patterns(assets, platform.os_patterns, label="OS")
    if not by_os:
        raise NotFoundError(
            f"No assets found for OS: {platform.os}",
            details=asset_names(assets),
        )

    logger.debug("Filtering assets by ARCH patterns: %s", " ".join(platform.arch_patterns))
    by_arch = filter_by_patterns(by_os, platform.arch_patterns, label="ARCH")
    if not by_arch:
        raise NotFoundError(
            f"No assets found for architecture: {platform.arch} (OS: {platform.os})",
            details=asset_names(by_os),
        )

    if not pattern:
        return by_arch

    logger.info("Filtering assets with pattern: '%s'", pattern)
    by_pattern = filter_by_substring(by_arch, pattern)
    if not by_pattern:
        raise NotFoundError(
            f"No assets matched the pattern '{pattern}'",
            details=asset_names(by_arch),
        )
    return by_pattern
