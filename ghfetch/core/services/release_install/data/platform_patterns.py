"""
L0 Data — Platform name tables.

Raw platform names → canonical variants, and canonical variants →
the substrings upstream projects use for them in asset file names.

Upstream projects do not agree on naming:

    Go / goreleaser style:   linux_amd64, darwin_arm64
    uname -m style:          Linux-x86_64, aarch64
    Rust target style:       x86_64-unknown-linux-gnu, apple-darwin

so each canonical value maps to every spelling we have seen.  The
underscore-prefixed forms are kept alongside the bare ones so the
table reads the same as the naming conventions it was built from.
"""

from __future__ import annotations

from ghfetch.core.models.platform import Architecture, OperatingSystem

# ``platform.system().lower()`` → canonical OS.
_OS_MAP: dict[str, OperatingSystem] = {
    "linux": OperatingSystem.LINUX,
    "darwin": OperatingSystem.DARWIN,
    "macos": OperatingSystem.DARWIN,
    "windows": OperatingSystem.WINDOWS,
    "freebsd": OperatingSystem.FREEBSD,
}

# MSYS / Cygwin report e.g. ``mingw64_nt-10.0``.
_WINDOWS_PREFIXES: tuple[str, ...] = ("mingw", "msys", "cygwin")

# ``platform.machine()`` → canonical architecture.
_ARCH_MAP: dict[str, Architecture] = {
    "x86_64": Architecture.AMD64,
    "amd64": Architecture.AMD64,      # Windows / BSD
    "aarch64": Architecture.ARM64,
    "arm64": Architecture.ARM64,      # macOS (Darwin reports arm64)
    "armv7l": Architecture.ARMV7,
    "armv7": Architecture.ARMV7,
    "armv6l": Architecture.ARMV6,
    "armv6": Architecture.ARMV6,
    "i386": Architecture.I386,
    "i686": Architecture.I386,
    "386": Architecture.I386,
}

OS_PATTERNS: dict[OperatingSystem, tuple[str, ...]] = {
    OperatingSystem.LINUX: ("linux", "_linux"),
    OperatingSystem.DARWIN: (
        "darwin", "_darwin", "macos", "_macos", "macOS", "_macOS",
        "osx", "_osx", "OSX", "_OSX",
    ),
    OperatingSystem.WINDOWS: ("windows", "_windows", "win", "_win", "Win", "_Win"),
    OperatingSystem.FREEBSD: ("freebsd", "_freebsd"),
}

ARCH_PATTERNS: dict[Architecture, tuple[str, ...]] = {
    Architecture.AMD64: ("amd64", "_amd64", "x86_64", "_x86_64", "x64", "_x64"),
    Architecture.ARM64: ("arm64", "_arm64", "aarch64", "_aarch64"),
    Architecture.ARMV7: ("armv7", "_armv7", "arm", "_arm"),
    Architecture.ARMV6: ("armv6", "_armv6"),
    Architecture.I386: ("386", "_386", "i386", "_i386", "i686", "_i686"),
}
