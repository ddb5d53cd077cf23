"""
Configuration loader — user defaults file + per-run install config.

Two steps:

    load_defaults()        optional YAML file → validated ``Defaults``
    build_install_config() CLI options + env + defaults → ``InstallConfig``

Precedence for every setting: CLI option > environment > config file
> built-in default.  The resulting ``InstallConfig`` is frozen and is
the only configuration any pipeline stage sees.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

from ghfetch.core.models.install import InstallConfig
from ghfetch.core.services.release_install.data.constants import (
    DEFAULT_GIT_SERVER,
    DEFAULT_INSTALL_DIR,
    DEFAULT_USER_BIN_DIR,
)
from ghfetch.core.services.release_install.detection.platform import detect_arch, detect_os
from ghfetch.core.services.release_install.domain.input_validation import (
    _validate_binary_name,
    _validate_repository,
    split_repository,
)
from ghfetch.core.services.release_install.domain.platform import canonical_arch, canonical_os
from ghfetch.core.services.release_install.errors import ValidationError

logger = logging.getLogger(__name__)

# Default config location (XDG style)
CONFIG_FILE_ENV = "GHFETCH_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/ghfetch/config.yml")


class ConfigError(Exception):
    """Raised when the defaults file is unreadable or invalid."""


class Defaults(BaseModel):
    """User-level defaults, read from config.yml."""

    model_config = ConfigDict(extra="forbid")

    install_dir: str = DEFAULT_INSTALL_DIR
    user_bin_dir: str = DEFAULT_USER_BIN_DIR
    git_server: str = DEFAULT_GIT_SERVER


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Locate the defaults file.

    An explicit path (``--config``) or ``GHFETCH_CONFIG`` is returned
    as-is even if missing, so ``load_defaults`` can report it; the
    default location is only returned when it exists.
    """
    if explicit is not None:
        return explicit
    env_path = os.environ.get(CONFIG_FILE_ENV, "").strip()
    if env_path:
        return Path(env_path).expanduser()
    default = DEFAULT_CONFIG_PATH.expanduser()
    return default if default.is_file() else None


def load_defaults(path: Path | None = None) -> Defaults:
    """Load and validate the defaults file.

    Args:
        path: Explicit path to config.yml.  If None, ``GHFETCH_CONFIG``
            and then ``~/.config/ghfetch/config.yml`` are tried.

    Returns:
        Validated Defaults (built-ins when no file exists).

    Raises:
        ConfigError: If an explicitly named file is missing or any file
            is invalid.
    """
    path = find_config_file(path)
    if path is None:
        return Defaults()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading defaults from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Defaults()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return Defaults.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def _pick(cli_value: str | None, env_name: str, default: str) -> str:
    if cli_value:
        return cli_value
    return os.environ.get(env_name, "").strip() or default


def build_install_config(
    repository: str,
    *,
    binary_name: str | None = None,
    version: str | None = None,
    os_name: str | None = None,
    arch: str | None = None,
    extracted_dir: str | None = None,
    install_dir: str | None = None,
    pattern: str | None = None,
    git_server: str | None = None,
    force: bool = False,
    defaults: Defaults | None = None,
) -> InstallConfig:
    """Validate inputs and build the run's immutable configuration.

    The binary name defaults to the repository name; OS and arch
    default to the running host.

    Raises:
        ValidationError: Malformed repository or binary name.
    """
    defaults = defaults or Defaults()

    error = _validate_repository(repository)
    if error:
        raise ValidationError(error)
    owner, repo = split_repository(repository)

    if not binary_name:
        binary_name = repo
        logger.info("Binary name not specified, using repository name: %s", binary_name)
    error = _validate_binary_name(binary_name)
    if error:
        raise ValidationError(error)

    return InstallConfig(
        owner=owner,
        repo=repo,
        binary_name=binary_name,
        version=version or None,
        pattern=pattern or None,
        extracted_dir=extracted_dir or None,
        os=canonical_os(os_name) if os_name else detect_os(),
        arch=canonical_arch(arch) if arch else detect_arch(),
        git_server=_pick(git_server, "GHFETCH_GIT_SERVER", defaults.git_server),
        install_dir=_pick(install_dir, "GHFETCH_INSTALL_DIR", defaults.install_dir),
        user_bin_dir=defaults.user_bin_dir,
        force=force,
    )
