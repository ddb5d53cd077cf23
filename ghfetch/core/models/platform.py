"""
Platform models — the canonical OS / architecture a binary is built for.

Raw names (``uname`` output, user overrides) are mapped onto these
variants by the release_install data tables.  Values outside the
enums are still carried as plain strings on ``PlatformSpec``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class OperatingSystem(StrEnum):
    """Operating systems with a known pattern set."""

    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"
    FREEBSD = "freebsd"


class Architecture(StrEnum):
    """CPU architectures with a known pattern set (Go-style names)."""

    AMD64 = "amd64"
    ARM64 = "arm64"
    ARMV7 = "armv7"
    ARMV6 = "armv6"
    I386 = "386"


class PlatformSpec(BaseModel):
    """Target platform plus the substrings that identify it in asset names.

    Pattern sets are ordered and compared case-insensitively.
    """

    model_config = ConfigDict(frozen=True)

    os: str
    arch: str
    os_patterns: tuple[str, ...]
    arch_patterns: tuple[str, ...]

    @property
    def label(self) -> str:
        return f"{self.os}/{self.arch}"
