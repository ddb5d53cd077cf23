"""
L2 Resolver — Version resolution.

Turns "latest" (no explicit version) or a user-supplied version into a
``ReleaseVersion`` with the ``v`` prefix stripped.
"""

from __future__ import annotations

import logging

from ghfetch.core.models.install import InstallConfig
from ghfetch.core.models.release import ReleaseVersion
from ghfetch.core.services.release_install.errors import NotFoundError
from ghfetch.core.services.release_install.resolver.release_feed import (
    _fetch_json,
    latest_release_url,
)

logger = logging.getLogger(__name__)


def fetch_latest_version(config: InstallConfig) -> ReleaseVersion:
    """Ask the feed for the latest release tag.

    Raises:
        NotFoundError: The repository has no releases.
        NetworkError: The request failed or timed out.
    """
    url = latest_release_url(config.api_base, config.owner, config.repo)
    logger.info("Fetching latest version from %s...", config.repository)

    try:
        data = _fetch_json(url)
    except NotFoundError as exc:
        raise NotFoundError(
            f"No releases found for {config.repository}",
            details=[f"Check available releases at: {config.releases_page}"],
        ) from exc

    tag = data.get("tag_name")
    if not isinstance(tag, str) or not tag.strip():
        raise NotFoundError(
            f"No releases found for {config.repository}",
            details=[f"Check available releases at: {config.releases_page}"],
        )
    return ReleaseVersion.parse(tag)


def resolve_version(config: InstallConfig) -> ReleaseVersion:
    """Use the configured version verbatim, or fetch the latest one."""
    if config.version:
        version = ReleaseVersion.parse(config.version)
        logger.debug("Using requested version %s", version)
        return version
    return fetch_latest_version(config)
