"""
L2 Resolver — Release feed HTTP access.

The single place where the release feed API is called.  One attempt
per request: retries belong to the downloader only.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from ghfetch.core.services.release_install.data.constants import (
    API_ACCEPT,
    API_TIMEOUT_SECONDS,
    USER_AGENT,
)
from ghfetch.core.services.release_install.errors import NetworkError, NotFoundError

logger = logging.getLogger(__name__)


def _fetch_json(url: str, *, timeout: int = API_TIMEOUT_SECONDS) -> dict[str, Any]:
    """GET ``url`` and decode a JSON object.

    Raises:
        NotFoundError: The feed answered 404.
        NetworkError: Any other HTTP error, a timeout, a connection
            failure, or a body that is not a JSON object.
    """
    req = urllib.request.Request(
        url,
        headers={"Accept": API_ACCEPT, "User-Agent": USER_AGENT},
    )
    logger.debug("GET %s", url)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            raw = resp.read()
    except urllib.error.HTTPError as exc:
        if exc.code == 404:
            raise NotFoundError(f"Not found: {url}") from exc
        raise NetworkError(f"HTTP {exc.code} from {url}: {exc.reason}") from exc
    except (urllib.error.URLError, http.client.HTTPException, TimeoutError, OSError) as exc:
        reason = getattr(exc, "reason", exc)
        raise NetworkError(f"Request to {url} failed: {reason}") from exc

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise NetworkError(f"Invalid JSON from {url}: {exc}") from exc

    if not isinstance(data, dict):
        raise NetworkError(f"Unexpected response from {url}: expected a JSON object")
    return data


def latest_release_url(api_base: str, owner: str, repo: str) -> str:
    return f"{api_base}/repos/{owner}/{repo}/releases/latest"


def release_by_tag_url(api_base: str, owner: str, repo: str, tag: str) -> str:
    return f"{api_base}/repos/{owner}/{repo}/releases/tags/{tag}"
