"""
Domain models — Pydantic types shared by the install pipeline.

All models are re-exported here for convenient access:

    from ghfetch.core.models import InstallConfig, ReleaseAsset, PlatformSpec
"""

from ghfetch.core.models.install import (
    BinaryCandidate,
    InstallConfig,
    InstallOutcome,
    InstallTarget,
    PrivilegeMode,
)
from ghfetch.core.models.platform import Architecture, OperatingSystem, PlatformSpec
from ghfetch.core.models.release import (
    VERSION_PREFIX,
    DownloadResult,
    ReleaseAsset,
    ReleaseVersion,
    ScoredCandidate,
)

__all__ = [
    # platform.py
    "Architecture",
    # install.py
    "BinaryCandidate",
    # release.py
    "DownloadResult",
    "InstallConfig",
    "InstallOutcome",
    "InstallTarget",
    "OperatingSystem",
    "PlatformSpec",
    "PrivilegeMode",
    "ReleaseAsset",
    "ReleaseVersion",
    "ScoredCandidate",
    "VERSION_PREFIX",
]
