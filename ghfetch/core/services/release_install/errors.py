"""
Release install errors — one hierarchy for every pipeline failure.

Every error carries ``details``: the lines a user needs to work out
what went wrong (the candidates that were available, the files that
were extracted, where to look on the releases page).  The CLI prints
them under the message.
"""

from __future__ import annotations


class ReleaseInstallError(Exception):
    """Base class for all install pipeline failures."""

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: list[str] = list(details or [])


class ValidationError(ReleaseInstallError):
    """Malformed repository or binary name.  Raised before any I/O."""


class NetworkError(ReleaseInstallError):
    """A request to the release feed or a download could not complete."""


class NotFoundError(ReleaseInstallError):
    """No release, no assets, or a filter pass narrowed candidates to zero."""


class ExtractionError(ReleaseInstallError):
    """The downloaded file could not be decompressed."""


class LocateError(ReleaseInstallError):
    """The binary is not present in the extracted tree."""


class InstallPermissionError(ReleaseInstallError):
    """The install directory is not writable and no elevation is available.

    Recoverable: the orchestrator falls back to the user bin directory.
    """


class InstallError(ReleaseInstallError):
    """Copying the binary into place failed for a reason other than permissions."""
