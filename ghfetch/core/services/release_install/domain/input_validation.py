"""
L1 Domain — Input validation (pure).

Validates the user-provided repository and binary names before any
network activity.  No I/O, no subprocess.
"""

from __future__ import annotations

import re

_REPO_RE = re.compile(r"^[\w.-]+/[\w.-]+$")
_BINARY_RE = re.compile(r"^[\w.-]+$")


def _validate_repository(repository: str) -> str | None:
    """Validate an ``owner/repo`` identifier.

    Returns:
        Error message string, or ``None`` if valid.
    """
    if not repository:
        return "Repository is required (expected format: owner/repo)"
    if not _REPO_RE.match(repository):
        return f"Invalid repository format: '{repository}' (expected format: owner/repo)"
    return None


def _validate_binary_name(binary_name: str) -> str | None:
    """Validate a binary name: letters, digits, dots, hyphens, underscores.

    Returns:
        Error message string, or ``None`` if valid.
    """
    if not binary_name or not _BINARY_RE.match(binary_name):
        return (
            f"Invalid binary name: '{binary_name}'; use only alphanumeric "
            "characters, dots, hyphens, and underscores"
        )
    return None


def split_repository(repository: str) -> tuple[str, str]:
    """Split a validated ``owner/repo`` into its two parts."""
    owner, _, repo = repository.partition("/")
    return owner, repo
