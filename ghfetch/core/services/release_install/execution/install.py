"""
L4 Execution — Installing the binary.

Copies the located binary into the install directory, escalating
privilege only when the directory cannot be written directly.  When
no escalation is available the system install raises
``InstallPermissionError`` and the caller falls back to the user's
own bin directory.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path

from ghfetch.core.models.install import InstallTarget
from ghfetch.core.services.release_install.detection.privilege import (
    PrivilegeExecutor,
    resolve_privilege,
)
from ghfetch.core.services.release_install.errors import InstallError, InstallPermissionError

logger = logging.getLogger(__name__)


def make_executable(path: Path) -> None:
    """Add the executable bits wherever the read bits are set."""
    mode = path.stat().st_mode
    path.chmod(mode | ((mode & 0o444) >> 2) | stat.S_IXUSR)


def _copy_atomic(src: Path, target: Path) -> None:
    """Copy via a temporary sibling so the target is never half-written.

    Replacing (rather than overwriting) also works when the old binary
    is currently running.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    os.close(fd)
    tmp = Path(tmp_name)
    try:
        shutil.copy2(src, tmp)
        tmp.replace(target)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def _path_entries() -> list[str]:
    return [
        os.path.normpath(os.path.expanduser(p))
        for p in os.environ.get("PATH", "").split(os.pathsep)
        if p
    ]


def is_on_path(directory: Path) -> bool:
    return os.path.normpath(str(directory)) in _path_entries()


class Installer:
    """Installs one binary, resolving privilege at most once.

    Args:
        resolve: Factory for the privilege executor.  Called lazily the
            first time elevation is needed, then cached for the run.
    """

    def __init__(self, resolve: Callable[[], PrivilegeExecutor] = resolve_privilege) -> None:
        self._resolve = resolve
        self._executor: PrivilegeExecutor | None = None

    @property
    def executor(self) -> PrivilegeExecutor:
        if self._executor is None:
            self._executor = self._resolve()
        return self._executor

    def _elevated(self, cmd: list[str], failure: str) -> None:
        executor = self.executor
        if not executor.available:
            raise InstallPermissionError(failure)
        result = executor.run_elevated(cmd)
        if not result["ok"]:
            raise InstallPermissionError(
                f"{failure}: {result.get('stderr') or result['error']}".strip(),
            )

    def _ensure_directory(self, directory: Path) -> None:
        if directory.is_dir():
            return
        logger.info("Creating install directory: %s", directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            logger.debug("Directory created without privilege escalation")
        except OSError as exc:
            logger.debug("mkdir %s failed (%s), escalating", directory, exc)
            self._elevated(["mkdir", "-p", str(directory)], f"Cannot create directory {directory}")

    def install(self, binary_path: Path, target: InstallTarget) -> Path:
        """Install ``binary_path`` as ``target``.

        Raises:
            InstallPermissionError: The directory cannot be created or
                written and no elevation mechanism is available (or the
                elevated command failed).
            InstallError: The direct copy failed for any other reason.
        """
        make_executable(binary_path)

        directory = Path(target.directory).expanduser()
        destination = directory / target.binary_name
        self._ensure_directory(directory)

        logger.info("Installing %s to %s...", target.binary_name, directory)
        if os.access(directory, os.W_OK):
            logger.debug("User has write permission to %s", directory)
            try:
                _copy_atomic(binary_path, destination)
            except PermissionError as exc:
                raise InstallPermissionError(f"Cannot install to {directory}: {exc}") from exc
            except OSError as exc:
                raise InstallError(
                    f"Failed to install {target.binary_name} to {directory}",
                    details=[f"Destination: {destination}", f"Error: {exc}"],
                ) from exc
        else:
            self._elevated(
                ["cp", str(binary_path), str(destination)],
                f"Cannot install to {directory} (permission denied)",
            )

        logger.info("Installed %s to %s", target.binary_name, destination)
        return destination


def install_to_user_directory(binary_path: Path, binary_name: str, user_bin_dir: str) -> tuple[Path, bool]:
    """Install into the user's own bin directory, no elevation involved.

    Returns:
        ``(installed_path, on_path)`` where ``on_path`` tells whether
        the directory is on PATH.

    Raises:
        InstallError: The directory cannot be created or written.
    """
    directory = Path(user_bin_dir).expanduser()
    destination = directory / binary_name
    try:
        directory.mkdir(parents=True, exist_ok=True)
        make_executable(binary_path)
        _copy_atomic(binary_path, destination)
    except OSError as exc:
        raise InstallError(
            f"Failed to install {binary_name} to {directory}",
            details=[f"Destination: {destination}", f"Error: {exc}"],
        ) from exc
    logger.info("Installed %s to %s", binary_name, directory)

    on_path = is_on_path(directory)
    if not on_path:
        logger.warning("Note: %s is not in your PATH", directory)
        logger.warning('Add this to your shell profile: export PATH="$PATH:%s"', directory)
    return destination, on_path
