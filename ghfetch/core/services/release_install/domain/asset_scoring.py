"""
L1 Domain — Asset scoring (pure).

Picks one asset out of the filtered candidates using nothing but the
file name.  Scores only ever add up from zero:

    extension   .tar.gz 10 · .tgz 9 · .zip 8 · .tar.bz2 7 · .bz2 6 · other 5
    short name  +3 when shorter than 50 characters
    not source  +2 when the name has neither "src" nor "source"

Selection replaces the running best only on a strictly higher score,
so equal scores keep catalog (publication) order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ghfetch.core.models.release import ReleaseAsset, ScoredCandidate
from ghfetch.core.services.release_install.data.constants import (
    DEFAULT_EXTENSION_SCORE,
    EXTENSION_SCORES,
    NOT_SOURCE_BONUS,
    SHORT_NAME_BONUS,
    SHORT_NAME_LIMIT,
    SOURCE_MARKERS,
)

logger = logging.getLogger(__name__)


def _extension_score(name: str) -> int:
    for suffix, score in EXTENSION_SCORES:
        if name.endswith(suffix):
            return score
    return DEFAULT_EXTENSION_SCORE


def score_asset_name(name: str) -> int:
    """Score an asset purely from its file name."""
    score = _extension_score(name)
    if len(name) < SHORT_NAME_LIMIT:
        score += SHORT_NAME_BONUS
    if not any(marker in name for marker in SOURCE_MARKERS):
        score += NOT_SOURCE_BONUS
    return score


def score_assets(assets: Sequence[ReleaseAsset]) -> list[ScoredCandidate]:
    """Score every candidate, preserving input order."""
    scored = [ScoredCandidate(asset=a, score=score_asset_name(a.name)) for a in assets]
    for cand in scored:
        logger.debug("Asset: %s, Score: %d", cand.asset.name, cand.score)
    return scored


def select_best_asset(assets: Sequence[ReleaseAsset]) -> ScoredCandidate | None:
    """Return the highest-scoring candidate, first one on ties.

    Returns ``None`` only for an empty input.
    """
    best: ScoredCandidate | None = None
    for cand in score_assets(assets):
        if best is None or cand.score > best.score:
            best = cand
    return best
