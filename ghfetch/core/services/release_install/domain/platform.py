"""
L1 Domain — Platform canonicalisation and pattern sets (pure).

Turns raw OS / architecture names into canonical values and builds
the ``PlatformSpec`` the asset matcher filters with.
"""

from __future__ import annotations

from ghfetch.core.models.platform import Architecture, OperatingSystem, PlatformSpec
from ghfetch.core.services.release_install.data.platform_patterns import (
    _ARCH_MAP,
    _OS_MAP,
    _WINDOWS_PREFIXES,
    ARCH_PATTERNS,
    OS_PATTERNS,
)


def canonical_os(raw: str) -> str:
    """Map a raw OS name to its canonical spelling.

    Unknown names pass through lower-cased.
    """
    name = raw.strip().lower()
    if name in _OS_MAP:
        return _OS_MAP[name].value
    if name.startswith(_WINDOWS_PREFIXES):
        return OperatingSystem.WINDOWS.value
    return name


def canonical_arch(raw: str) -> str:
    """Map a raw machine name to its canonical spelling.

    Unknown names pass through unchanged (``ppc64le``, ``s390x``, ...).
    """
    name = raw.strip()
    mapped = _ARCH_MAP.get(name) or _ARCH_MAP.get(name.lower())
    return mapped.value if mapped else name


def os_patterns(os_name: str) -> tuple[str, ...]:
    """Ordered substrings identifying ``os_name`` in asset names."""
    try:
        return OS_PATTERNS[OperatingSystem(os_name)]
    except ValueError:
        return (os_name,)


def arch_patterns(arch: str) -> tuple[str, ...]:
    """Ordered substrings identifying ``arch`` in asset names."""
    try:
        return ARCH_PATTERNS[Architecture(arch)]
    except ValueError:
        return (arch,)


def build_platform_spec(os_name: str, arch: str) -> PlatformSpec:
    """Build the target platform with its derived pattern sets."""
    return PlatformSpec(
        os=os_name,
        arch=arch,
        os_patterns=os_patterns(os_name),
        arch_patterns=arch_patterns(arch),
    )
