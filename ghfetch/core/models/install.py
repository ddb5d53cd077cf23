"""
Install models — run configuration and the artefacts of an install.

``InstallConfig`` is built exactly once per run (see
``ghfetch.core.config.loader.build_install_config``) and passed
explicitly to every pipeline stage.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class PrivilegeMode(StrEnum):
    """How the installer may write outside the user's own files."""

    DIRECT = "direct"   # already root
    SUDO = "sudo"
    DOAS = "doas"
    NONE = "none"


class InstallConfig(BaseModel):
    """Immutable configuration for one install run."""

    model_config = ConfigDict(frozen=True)

    # ── What to install ──────────────────────────────────────────
    owner: str
    repo: str
    binary_name: str
    version: str | None = None        # None → latest release
    pattern: str | None = None        # required substring, case-sensitive
    extracted_dir: str | None = None  # subdirectory inside the archive

    # ── Where to get it from ─────────────────────────────────────
    os: str
    arch: str
    git_server: str = "github.com"

    # ── Where to put it ──────────────────────────────────────────
    install_dir: str = "/usr/local/bin"
    user_bin_dir: str = "~/.local/bin"
    force: bool = False

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def api_base(self) -> str:
        """Root of the release feed API for the configured server."""
        return f"https://api.{self.git_server}"

    @property
    def releases_page(self) -> str:
        return f"https://{self.git_server}/{self.owner}/{self.repo}/releases"


class InstallTarget(BaseModel):
    """Final destination of the binary."""

    model_config = ConfigDict(frozen=True)

    directory: str
    binary_name: str

    @property
    def path(self) -> str:
        return f"{self.directory.rstrip('/')}/{self.binary_name}"


class BinaryCandidate(BaseModel):
    """A file inside the extracted tree that may be the binary."""

    model_config = ConfigDict(frozen=True)

    path: str
    score: int


class InstallOutcome(BaseModel):
    """What a finished run reports back to the caller."""

    binary_name: str
    version: str
    asset: str | None = None
    installed_path: str | None = None
    used_fallback: bool = False
    already_installed: bool = False
    verified_version: str | None = None
    warnings: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump()
