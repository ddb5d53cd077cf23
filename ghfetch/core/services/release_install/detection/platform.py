"""
L3 Detection — Host platform.

Read-only probe of the running OS and CPU, canonicalised to the names
the asset matcher understands.
"""

from __future__ import annotations

import platform

from ghfetch.core.services.release_install.domain.platform import canonical_arch, canonical_os


def detect_os() -> str:
    """Canonical name of the running OS (``linux``, ``darwin``, ...)."""
    return canonical_os(platform.system())


def detect_arch() -> str:
    """Canonical name of the running CPU (``amd64``, ``arm64``, ...)."""
    return canonical_arch(platform.machine())
