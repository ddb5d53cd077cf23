"""
Release install — retrying, resumable download.
"""

from __future__ import annotations

import http.client
import io
import urllib.error
from pathlib import Path
from unittest.mock import patch

import pytest

from ghfetch.core.models.release import ReleaseAsset
from ghfetch.core.services.release_install.domain.download_helpers import _fmt_size, backoff_schedule
from ghfetch.core.services.release_install.errors import NetworkError
from ghfetch.core.services.release_install.execution.download import download_asset

_URLOPEN = "ghfetch.core.services.release_install.execution.download.urllib.request.urlopen"

ASSET = ReleaseAsset(name="tool.tar.gz", url="https://example.test/tool.tar.gz")


class _Response(io.BytesIO):
    def __init__(self, body: bytes, status: int = 200, headers: dict | None = None) -> None:
        super().__init__(body)
        self.status = status
        self.headers = headers or {}


class _DroppedResponse(_Response):
    """Delivers its body, then the connection breaks mid-stream."""

    def read(self, size=-1):
        data = super().read(size)
        if not data:
            raise http.client.IncompleteRead(b"")
        return data


def _http_error(code: int) -> urllib.error.HTTPError:
    return urllib.error.HTTPError(ASSET.url, code, "err", {}, None)


class TestBackoff:
    def test_schedule(self):
        assert backoff_schedule(5, 2) == [2, 4, 8, 16]

    def test_single_attempt_never_waits(self):
        assert backoff_schedule(1, 2) == []

    def test_fmt_size(self):
        assert _fmt_size(512) == "512.0 B"
        assert _fmt_size(2 * 1024 * 1024) == "2.0 MB"


class TestDownloadAsset:
    def test_success_first_try(self, tmp_path: Path):
        waits: list[float] = []
        with patch(_URLOPEN, return_value=_Response(b"payload")):
            result = download_asset(ASSET, tmp_path, sleep=waits.append)
        assert result.byte_size == 7
        assert Path(result.local_path) == tmp_path / "tool.tar.gz"
        assert waits == []

    def test_all_attempts_fail(self, tmp_path: Path):
        waits: list[float] = []
        with patch(_URLOPEN, side_effect=urllib.error.URLError("refused")) as urlopen:
            with pytest.raises(NetworkError) as exc_info:
                download_asset(ASSET, tmp_path, sleep=waits.append)
        assert urlopen.call_count == 5
        assert waits == [2, 4, 8, 16]
        assert f"URL: {ASSET.url}" in exc_info.value.details

    def test_recovers_after_failures(self, tmp_path: Path):
        waits: list[float] = []
        responses = [_http_error(502), urllib.error.URLError("reset"), _Response(b"ok")]
        with patch(_URLOPEN, side_effect=responses):
            result = download_asset(ASSET, tmp_path, sleep=waits.append)
        assert result.byte_size == 2
        assert waits == [2, 4]

    def test_empty_body_is_retried(self, tmp_path: Path):
        waits: list[float] = []
        with patch(_URLOPEN, side_effect=[_Response(b""), _Response(b"data")]):
            result = download_asset(ASSET, tmp_path, sleep=waits.append)
        assert result.byte_size == 4
        assert waits == [2]

    def test_resumes_partial_file(self, tmp_path: Path):
        (tmp_path / ASSET.name).write_bytes(b"abc")
        with patch(_URLOPEN, return_value=_Response(b"def", status=206)) as urlopen:
            result = download_asset(ASSET, tmp_path, sleep=lambda _s: None)
        request = urlopen.call_args.args[0]
        assert request.get_header("Range") == "bytes=3-"
        assert (tmp_path / ASSET.name).read_bytes() == b"abcdef"
        assert result.byte_size == 6

    def test_range_ignored_restarts(self, tmp_path: Path):
        (tmp_path / ASSET.name).write_bytes(b"stale")
        with patch(_URLOPEN, return_value=_Response(b"fresh-body", status=200)):
            download_asset(ASSET, tmp_path, sleep=lambda _s: None)
        assert (tmp_path / ASSET.name).read_bytes() == b"fresh-body"

    def test_416_on_complete_file(self, tmp_path: Path):
        (tmp_path / ASSET.name).write_bytes(b"complete")
        with patch(_URLOPEN, side_effect=_http_error(416)):
            result = download_asset(ASSET, tmp_path, sleep=lambda _s: None)
        assert result.byte_size == 8

    def test_404_retried_then_fails(self, tmp_path: Path):
        with patch(_URLOPEN, side_effect=_http_error(404)) as urlopen:
            with pytest.raises(NetworkError):
                download_asset(ASSET, tmp_path, max_attempts=2, sleep=lambda _s: None)
        assert urlopen.call_count == 2


class TestTruncatedTransfers:
    def test_short_body_is_resumed(self, tmp_path: Path):
        waits: list[float] = []
        responses = [
            _Response(b"abc", headers={"Content-Length": "6"}),
            _Response(b"def", status=206, headers={"Content-Length": "3", "Content-Range": "bytes 3-5/6"}),
        ]
        with patch(_URLOPEN, side_effect=responses) as urlopen:
            result = download_asset(ASSET, tmp_path, sleep=waits.append)

        assert urlopen.call_args_list[1].args[0].get_header("Range") == "bytes=3-"
        assert (tmp_path / ASSET.name).read_bytes() == b"abcdef"
        assert result.byte_size == 6
        assert waits == [2]

    def test_always_short_fails(self, tmp_path: Path):
        def short(*args, **kwargs):
            return _Response(b"x" * 10, headers={"Content-Length": "1000"})

        with patch(_URLOPEN, side_effect=short) as urlopen:
            with pytest.raises(NetworkError):
                download_asset(ASSET, tmp_path, sleep=lambda _s: None)
        assert urlopen.call_count == 5

    def test_short_resumed_part_fails(self, tmp_path: Path):
        (tmp_path / ASSET.name).write_bytes(b"abc")
        responses = [
            _Response(b"d", status=206, headers={"Content-Range": "bytes 3-5/6"}),
            _Response(b"ef", status=206, headers={"Content-Range": "bytes 4-5/6"}),
        ]
        with patch(_URLOPEN, side_effect=responses):
            result = download_asset(ASSET, tmp_path, sleep=lambda _s: None)
        assert (tmp_path / ASSET.name).read_bytes() == b"abcdef"
        assert result.byte_size == 6

    def test_incomplete_read_is_retried_and_resumed(self, tmp_path: Path):
        waits: list[float] = []
        responses = [
            _DroppedResponse(b"abc"),
            _Response(b"def", status=206, headers={"Content-Range": "bytes 3-5/6"}),
        ]
        with patch(_URLOPEN, side_effect=responses) as urlopen:
            result = download_asset(ASSET, tmp_path, sleep=waits.append)

        assert urlopen.call_count == 2
        assert urlopen.call_args_list[1].args[0].get_header("Range") == "bytes=3-"
        assert result.byte_size == 6
        assert waits == [2]

    def test_bad_status_line_becomes_network_error(self, tmp_path: Path):
        with patch(_URLOPEN, side_effect=http.client.BadStatusLine("garbage")) as urlopen:
            with pytest.raises(NetworkError):
                download_asset(ASSET, tmp_path, max_attempts=3, sleep=lambda _s: None)
        assert urlopen.call_count == 3
