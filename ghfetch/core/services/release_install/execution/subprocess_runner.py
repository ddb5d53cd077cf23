"""
L4 Execution — Core subprocess runner.

The SINGLE PLACE where ``subprocess.run`` is called for install
operations.  Logging and error handling are centralised here; the
runner never raises, failures come back as ``{"ok": False, ...}``.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import Any

logger = logging.getLogger(__name__)


def _run_subprocess(
    cmd: list[str],
    *,
    prefix: list[str] | None = None,
    timeout: int = 120,
    capture: bool = True,
) -> dict[str, Any]:
    """Run a command, optionally behind an elevation prefix.

    Args:
        cmd: Command list for ``subprocess.run()``.
        prefix: Elevation prefix (``["sudo"]``, ``["doas"]``) or None.
        timeout: Seconds before ``TimeoutExpired``.
        capture: Capture stdout/stderr.  Interactive elevation probes
            pass False so the password prompt reaches the terminal.

    Returns:
        ``{"ok": True, "stdout": "...", "elapsed_ms": N}`` on success,
        ``{"ok": False, "error": "...", ...}`` on failure.
    """
    full_cmd = (prefix or []) + cmd
    logger.debug("Running: %s", " ".join(full_cmd))

    start = time.monotonic()
    try:
        result = subprocess.run(
            full_cmd,
            capture_output=capture,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return {"ok": False, "error": f"Command timed out ({timeout}s)"}
    except OSError as e:
        # Missing executable, permission denied on exec, ...
        return {"ok": False, "error": str(e)}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = (result.stdout or "")[-2000:] if capture else ""
    stderr = (result.stderr or "")[-2000:] if capture else ""

    if result.returncode == 0:
        return {"ok": True, "stdout": stdout, "stderr": stderr, "elapsed_ms": elapsed_ms}

    return {
        "ok": False,
        "error": f"Command failed (exit {result.returncode})",
        "returncode": result.returncode,
        "stderr": stderr,
        "stdout": stdout,
        "elapsed_ms": elapsed_ms,
    }
