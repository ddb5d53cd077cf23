"""
Shared test fixtures and configuration.
"""

import io
import logging
import tarfile
from pathlib import Path

import pytest

from ghfetch.core.models.install import InstallConfig
from ghfetch.core.models.release import ReleaseAsset


@pytest.fixture
def make_config():
    """Build an InstallConfig with test-friendly defaults."""

    def _make(**overrides) -> InstallConfig:
        values = {
            "owner": "acme",
            "repo": "tool",
            "binary_name": "tool",
            "os": "linux",
            "arch": "amd64",
        }
        values.update(overrides)
        return InstallConfig(**values)

    return _make


@pytest.fixture
def catalog() -> list[ReleaseAsset]:
    """The four-asset release most scenarios start from."""
    names = [
        "tool_linux_amd64.tar.gz",
        "tool_darwin_amd64.tar.gz",
        "tool_windows_amd64.zip",
        "tool_src.tar.gz",
    ]
    return [ReleaseAsset(name=n, url=f"https://example.test/dl/{n}") for n in names]


@pytest.fixture
def make_tar_gz():
    """Write a .tar.gz containing ``{member: (bytes, mode)}``."""

    def _make(path: Path, members: dict[str, tuple[bytes, int]]) -> Path:
        with tarfile.open(path, "w:gz") as tar:
            for name, (data, mode) in members.items():
                info = tarfile.TarInfo(name=name)
                info.size = len(data)
                info.mode = mode
                tar.addfile(info, io.BytesIO(data))
        return path

    return _make


@pytest.fixture
def restore_logging():
    """Put the root logger back after a test that reconfigures it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
