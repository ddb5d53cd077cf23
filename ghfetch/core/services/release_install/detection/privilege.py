"""
L3 Detection — Privilege escalation capability.

Works out, once per run, how the installer can write to directories
the current user does not own.  Preference order:

    running as root        → direct
    sudo without password  → sudo
    sudo with password     → sudo   (prompts on the terminal)
    doas                   → doas
    nothing                → none

The installer only talks to the resulting ``PrivilegeExecutor``; it
never knows which mechanism sits behind ``run_elevated``.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from typing import Any

from ghfetch.core.models.install import PrivilegeMode
from ghfetch.core.services.release_install.data.constants import PRIVILEGE_PROBE_TIMEOUT
from ghfetch.core.services.release_install.execution.subprocess_runner import _run_subprocess

logger = logging.getLogger(__name__)

_PREFIXES: dict[PrivilegeMode, list[str]] = {
    PrivilegeMode.DIRECT: [],
    PrivilegeMode.SUDO: ["sudo"],
    PrivilegeMode.DOAS: ["doas"],
}


@dataclass(frozen=True)
class PrivilegeExecutor:
    """Runs commands with whatever elevation was resolved for this run."""

    mode: PrivilegeMode

    @property
    def available(self) -> bool:
        return self.mode is not PrivilegeMode.NONE

    def run_elevated(self, cmd: list[str], *, timeout: int = 120) -> dict[str, Any]:
        """Run ``cmd`` with elevated privilege.

        Returns the runner's result dict; never raises.
        """
        if not self.available:
            return {"ok": False, "error": "No privilege escalation available"}
        # Interactive sudo may need to re-prompt, so leave the terminal attached.
        return _run_subprocess(
            cmd,
            prefix=_PREFIXES[self.mode],
            timeout=timeout,
            capture=self.mode is not PrivilegeMode.SUDO,
        )


def _is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def detect_privilege_mode() -> PrivilegeMode:
    """Probe the host for the best available elevation mechanism."""
    if _is_root():
        logger.info("Running as root")
        return PrivilegeMode.DIRECT

    if shutil.which("sudo"):
        if _run_subprocess(["sudo", "-n", "true"], timeout=10)["ok"]:
            logger.info("Using sudo (passwordless)")
            return PrivilegeMode.SUDO
        if _run_subprocess(["sudo", "-v"], timeout=PRIVILEGE_PROBE_TIMEOUT, capture=False)["ok"]:
            logger.info("Using sudo (with password)")
            return PrivilegeMode.SUDO

    if shutil.which("doas"):
        if _run_subprocess(["doas", "true"], timeout=PRIVILEGE_PROBE_TIMEOUT, capture=False)["ok"]:
            logger.info("Using doas")
            return PrivilegeMode.DOAS

    logger.warning("No privilege escalation available")
    return PrivilegeMode.NONE


def resolve_privilege() -> PrivilegeExecutor:
    """Build the executor for the mode detected on this host."""
    return PrivilegeExecutor(mode=detect_privilege_mode())
