"""
Release install — finding the binary in an extracted tree.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ghfetch.core.services.release_install.errors import LocateError
from ghfetch.core.services.release_install.execution.locate import locate_binary


def _write(root: Path, rel: str, size: int = 10, mode: int = 0o644) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    path.chmod(mode)
    return path


class TestExplicitSubdir:
    def test_found(self, tmp_path: Path):
        _write(tmp_path, "dist/tool")
        assert locate_binary(tmp_path, "tool", "dist") == tmp_path / "dist" / "tool"

    def test_missing_lists_subdir(self, tmp_path: Path):
        _write(tmp_path, "dist/other")
        _write(tmp_path, "tool")
        with pytest.raises(LocateError) as exc_info:
            locate_binary(tmp_path, "tool", "dist")
        assert "dist" in exc_info.value.message
        assert any("other" in line for line in exc_info.value.details)

    def test_missing_subdir(self, tmp_path: Path):
        with pytest.raises(LocateError) as exc_info:
            locate_binary(tmp_path, "tool", "nope")
        assert any("does not exist" in line for line in exc_info.value.details)


class TestPhases:
    def test_root_first(self, tmp_path: Path):
        _write(tmp_path, "bin/tool", mode=0o755)
        _write(tmp_path, "tool")
        assert locate_binary(tmp_path, "tool") == tmp_path / "tool"

    def test_bin_over_completion(self, tmp_path: Path):
        _write(tmp_path, "bin/tool", size=2_000_000, mode=0o755)
        _write(tmp_path, "completion/tool", size=200)
        assert locate_binary(tmp_path, "tool") == tmp_path / "bin" / "tool"

    def test_executable_in_doc_dir_skipped(self, tmp_path: Path):
        _write(tmp_path, "a-doc/tool", mode=0o755)
        _write(tmp_path, "pkg/bin/tool")
        assert locate_binary(tmp_path, "tool") == tmp_path / "pkg" / "bin" / "tool"

    def test_scored_when_nothing_executable(self, tmp_path: Path):
        _write(tmp_path, "completions/tool", size=50)
        _write(tmp_path, "release/tool", size=300_000)
        assert locate_binary(tmp_path, "tool") == tmp_path / "release" / "tool"

    def test_last_resort(self, tmp_path: Path):
        _write(tmp_path, "share/doc/tool")
        assert locate_binary(tmp_path, "tool") == tmp_path / "share" / "doc" / "tool"

    def test_directory_with_binary_name_ignored(self, tmp_path: Path):
        (tmp_path / "tool").mkdir()
        _write(tmp_path, "tool/tool", mode=0o755)
        assert locate_binary(tmp_path, "tool") == tmp_path / "tool" / "tool"

    def test_not_found_lists_tree(self, tmp_path: Path):
        for i in range(30):
            _write(tmp_path, f"d{i:02d}/f{i:02d}")
        with pytest.raises(LocateError) as exc_info:
            locate_binary(tmp_path, "tool")
        details = exc_info.value.details
        files = [d for d in details if d.strip().startswith("./") and "/f" in d]
        dirs = [d for d in details if d.strip().startswith("./") and "/f" not in d]
        assert len(files) == 20
        assert len(dirs) == 10
