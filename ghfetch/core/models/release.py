"""
Release models — what the release feed tells us and what we pull from it.

A release is identified by its tag; it publishes assets. Everything
downstream of the catalog fetch consumes these read-only.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Leading character some projects put in front of their version tags.
VERSION_PREFIX = "v"


class ReleaseVersion(BaseModel):
    """A resolved release version.

    ``bare`` never carries the ``v`` prefix, so comparisons and tag
    probing do not depend on how the upstream project spells its tags.
    """

    model_config = ConfigDict(frozen=True)

    bare: str = Field(min_length=1)

    @classmethod
    def parse(cls, raw: str) -> ReleaseVersion:
        """Build from a tag or user-supplied version, stripping one ``v``."""
        raw = raw.strip()
        if raw.startswith(VERSION_PREFIX) and len(raw) > 1:
            raw = raw[1:]
        return cls(bare=raw)

    def tag_variants(self) -> tuple[str, str]:
        """Tags to probe, prefixed form first."""
        return (f"{VERSION_PREFIX}{self.bare}", self.bare)

    def __str__(self) -> str:
        return self.bare


class ReleaseAsset(BaseModel):
    """A single downloadable file attached to a release."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)


class ScoredCandidate(BaseModel):
    """An asset that survived filtering, with its name-based score."""

    model_config = ConfigDict(frozen=True)

    asset: ReleaseAsset
    score: int = Field(ge=0)


class DownloadResult(BaseModel):
    """A completed download on local disk."""

    model_config = ConfigDict(frozen=True)

    local_path: str
    byte_size: int = Field(gt=0)
