"""
Release install — archive dispatch and extraction.
"""

from __future__ import annotations

import bz2
import os
import zipfile
from pathlib import Path

import pytest

from ghfetch.core.services.release_install.errors import ExtractionError
from ghfetch.core.services.release_install.execution.extract import archive_kind, extract_archive


class TestArchiveKind:
    @pytest.mark.parametrize("name, kind", [
        ("tool.tar.gz", "tar.gz"),
        ("tool.tgz", "tar.gz"),
        ("tool.tar.bz2", "tar.bz2"),
        ("tool.zip", "zip"),
        ("tool.bz2", "bz2"),
        ("tool.exe", "binary"),
        ("tool", "binary"),
    ])
    def test_dispatch(self, name, kind):
        assert archive_kind(name) == kind


class TestExtractArchive:
    def test_tar_gz_keeps_mode(self, tmp_path: Path, make_tar_gz):
        archive = make_tar_gz(tmp_path / "tool.tar.gz", {
            "tool_1.0/tool": (b"#!/bin/sh\necho 1.0\n", 0o755),
            "tool_1.0/README.md": (b"readme", 0o644),
        })
        out = extract_archive(archive, tmp_path, "tool")
        assert out == tmp_path
        extracted = tmp_path / "tool_1.0" / "tool"
        assert extracted.read_bytes().startswith(b"#!/bin/sh")
        assert os.access(extracted, os.X_OK)

    def test_zip_restores_exec_bit(self, tmp_path: Path):
        archive = tmp_path / "tool.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            info = zipfile.ZipInfo("bin/tool")
            info.external_attr = 0o755 << 16
            zf.writestr(info, b"binary")
        extract_archive(archive, tmp_path, "tool")
        assert os.access(tmp_path / "bin" / "tool", os.X_OK)

    def test_standalone_bz2_renamed(self, tmp_path: Path):
        archive = tmp_path / "tool-linux-amd64.bz2"
        archive.write_bytes(bz2.compress(b"ELF..."))
        extract_archive(archive, tmp_path, "tool")
        assert (tmp_path / "tool").read_bytes() == b"ELF..."
        assert archive.exists()
        assert not (tmp_path / "tool-linux-amd64").exists()

    def test_plain_binary_copied(self, tmp_path: Path):
        raw = tmp_path / "tool_linux_amd64"
        raw.write_bytes(b"ELF")
        extract_archive(raw, tmp_path, "tool")
        assert (tmp_path / "tool").read_bytes() == b"ELF"

    def test_plain_binary_already_named(self, tmp_path: Path):
        raw = tmp_path / "tool"
        raw.write_bytes(b"ELF")
        extract_archive(raw, tmp_path, "tool")
        assert raw.read_bytes() == b"ELF"

    def test_corrupt_tarball(self, tmp_path: Path):
        bad = tmp_path / "tool.tar.gz"
        bad.write_bytes(b"definitely not gzip")
        with pytest.raises(ExtractionError, match="tar.gz"):
            extract_archive(bad, tmp_path, "tool")

    def test_corrupt_zip(self, tmp_path: Path):
        bad = tmp_path / "tool.zip"
        bad.write_bytes(b"PK but not really")
        with pytest.raises(ExtractionError):
            extract_archive(bad, tmp_path, "tool")

    def test_corrupt_bz2(self, tmp_path: Path):
        bad = tmp_path / "tool.bz2"
        bad.write_bytes(b"nope")
        with pytest.raises(ExtractionError):
            extract_archive(bad, tmp_path, "tool")

    def test_member_escaping_scratch_is_refused(self, tmp_path: Path, make_tar_gz):
        scratch = tmp_path / "scratch"
        scratch.mkdir()
        archive = make_tar_gz(scratch / "tool.tar.gz", {"../escape": (b"x", 0o755)})
        with pytest.raises(ExtractionError):
            extract_archive(archive, scratch, "tool")
        assert not (tmp_path / "escape").exists()
