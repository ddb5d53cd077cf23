"""
L4 Execution — Resumable, retrying asset download.

The only stage of the pipeline that retries.  Each attempt picks up
where the previous one stopped by asking for the missing byte range;
a server that ignores the range gets the file rewritten from zero.
"""

from __future__ import annotations

import http.client
import logging
import re
import time
import urllib.error
import urllib.request
from collections.abc import Callable
from pathlib import Path

from ghfetch.core.models.release import DownloadResult, ReleaseAsset
from ghfetch.core.services.release_install.data.constants import (
    DOWNLOAD_CHUNK_SIZE,
    DOWNLOAD_CONNECT_TIMEOUT,
    DOWNLOAD_INITIAL_BACKOFF,
    DOWNLOAD_MAX_ATTEMPTS,
    DOWNLOAD_TOTAL_TIMEOUT,
    USER_AGENT,
)
from ghfetch.core.services.release_install.domain.download_helpers import (
    _fmt_size,
    backoff_schedule,
)
from ghfetch.core.services.release_install.errors import NetworkError

logger = logging.getLogger(__name__)

_CONTENT_RANGE_TOTAL = re.compile(r"/(\d+)\s*$")


class _AttemptFailed(Exception):
    """One download attempt failed; the caller decides whether to retry."""


def _current_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except FileNotFoundError:
        return 0


def _expected_size(headers, offset: int, appending: bool) -> int | None:
    """Total size the file should reach after this response, if the server says."""
    if appending:
        match = _CONTENT_RANGE_TOTAL.search(headers.get("Content-Range") or "")
        if match:
            return int(match.group(1))
    length = headers.get("Content-Length")
    if length is None or not length.strip().isdigit():
        return None
    return int(length) + (offset if appending else 0)


def _download_attempt(
    url: str,
    dest: Path,
    *,
    connect_timeout: float,
    total_timeout: float,
) -> None:
    """Transfer ``url`` into ``dest``, resuming any partial content.

    Raises:
        _AttemptFailed: On HTTP errors, socket errors, or when the
            attempt runs past ``total_timeout``.
    """
    offset = _current_size(dest)
    headers = {"User-Agent": USER_AGENT, "Accept": "application/octet-stream"}
    if offset:
        headers["Range"] = f"bytes={offset}-"
        logger.debug("Resuming %s at byte %d", dest.name, offset)

    req = urllib.request.Request(url, headers=headers)
    deadline = time.monotonic() + total_timeout

    try:
        with urllib.request.urlopen(req, timeout=connect_timeout) as resp:
            # 206 → server honoured the range; anything else is the full body.
            appending = bool(offset) and resp.status == 206
            expected = _expected_size(resp.headers, offset, appending)
            with open(dest, "ab" if appending else "wb") as fh:
                while True:
                    if time.monotonic() > deadline:
                        raise _AttemptFailed(f"timed out after {total_timeout:.0f}s")
                    chunk = resp.read(DOWNLOAD_CHUNK_SIZE)
                    if not chunk:
                        break
                    fh.write(chunk)
        # The connection can close before Content-Length is reached
        # without read() raising; the partial file is resumed next attempt.
        received = _current_size(dest)
        if expected is not None and received < expected:
            raise _AttemptFailed(f"short read: got {received} of {expected} bytes")
    except urllib.error.HTTPError as exc:
        if exc.code == 416 and offset:
            # Nothing left to fetch: the previous attempt got it all.
            logger.debug("Range not satisfiable, %s already complete", dest.name)
            return
        raise _AttemptFailed(f"HTTP {exc.code}: {exc.reason}") from exc
    except (urllib.error.URLError, http.client.HTTPException, TimeoutError, OSError) as exc:
        raise _AttemptFailed(str(getattr(exc, "reason", exc)) or type(exc).__name__) from exc


def download_asset(
    asset: ReleaseAsset,
    scratch_dir: Path,
    *,
    max_attempts: int = DOWNLOAD_MAX_ATTEMPTS,
    initial_backoff: int = DOWNLOAD_INITIAL_BACKOFF,
    connect_timeout: float = DOWNLOAD_CONNECT_TIMEOUT,
    total_timeout: float = DOWNLOAD_TOTAL_TIMEOUT,
    sleep: Callable[[float], None] = time.sleep,
) -> DownloadResult:
    """Download ``asset`` into ``scratch_dir`` with bounded retries.

    Waits ``initial_backoff`` seconds after the first failure and
    doubles the wait after each further one.  A transfer that leaves
    an empty file counts as a failure.

    Raises:
        NetworkError: All attempts failed.  The message names the URL.
    """
    dest = scratch_dir / asset.name
    waits = backoff_schedule(max_attempts, initial_backoff)

    logger.info("Downloading %s...", asset.name)
    for attempt in range(1, max_attempts + 1):
        logger.debug("Attempt %d of %d: %s", attempt, max_attempts, asset.url)
        try:
            _download_attempt(
                asset.url,
                dest,
                connect_timeout=connect_timeout,
                total_timeout=total_timeout,
            )
        except _AttemptFailed as exc:
            logger.warning("Download attempt %d failed: %s", attempt, exc)
        else:
            size = _current_size(dest)
            if size > 0:
                logger.info("Downloaded %s (%s)", asset.name, _fmt_size(size))
                return DownloadResult(local_path=str(dest), byte_size=size)
            logger.warning("Downloaded file is empty, retrying...")

        if attempt < max_attempts:
            wait = waits[attempt - 1]
            logger.info("Waiting %d seconds before retry...", wait)
            sleep(wait)

    raise NetworkError(
        f"Failed to download {asset.name} after {max_attempts} attempts",
        details=[f"URL: {asset.url}"],
    )
