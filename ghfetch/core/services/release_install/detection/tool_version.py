"""
L3 Detection — Installed binary probes.

Read-only checks: is the binary already on PATH, and which version
does it report?
"""

from __future__ import annotations

import logging
import re
import shutil

from ghfetch.core.services.release_install.data.constants import (
    VERIFY_TIMEOUT_SECONDS,
    VERSION_FLAGS,
)
from ghfetch.core.services.release_install.execution.subprocess_runner import _run_subprocess

logger = logging.getLogger(__name__)

_SEMVER_RE = re.compile(r"\d+\.\d+\.\d+")


def find_on_path(binary_name: str) -> str | None:
    """Absolute path of ``binary_name`` on PATH, or None."""
    return shutil.which(binary_name)


def get_binary_version(binary_path: str) -> str | None:
    """Ask the binary for its version, trying the common flags in turn.

    The first flag that exits 0 decides: its output's first ``X.Y.Z``
    is returned, or ``"installed"`` when it prints no version number.

    Returns:
        Version string, ``"installed"``, or ``None`` if no flag worked.
    """
    for flag in VERSION_FLAGS:
        result = _run_subprocess([binary_path, flag], timeout=VERIFY_TIMEOUT_SECONDS)
        if not result["ok"]:
            logger.debug("%s %s: %s", binary_path, flag, result["error"])
            continue
        output = (result.get("stdout") or "") + (result.get("stderr") or "")
        first_line = output.strip().splitlines()[0] if output.strip() else ""
        match = _SEMVER_RE.search(first_line)
        return match.group(0) if match else "installed"
    return None
