"""
L1 Domain — Binary location scoring (pure).

When an archive holds several files with the binary's name (the real
executable, a shell completion script, a man page stub, ...), each
one is scored by where it sits.  The heuristic is an ordered table of
``ScoreRule``s over ``PathRecord``s, so it can be read and tested
without touching a filesystem.

    root directory                      +100
    path contains "bin"                  +50
    "completion" / "bash_completion"     -50
    "doc" / "man"                        -30
    "config" / "example" / "sample"      -30
    executable                           +20
    larger than 1 MB                     +10   (else > 100 KB: +5)

Path rules test the candidate's directory relative to the extraction
root (``"."`` for the root itself).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ghfetch.core.models.install import BinaryCandidate


@dataclass(frozen=True)
class PathRecord:
    """Structured view of one file in the extracted tree."""

    path: str          # relative to the extraction root, POSIX separators
    directory: str     # dirname of ``path``; "." at the root
    is_executable: bool
    size: int


@dataclass(frozen=True)
class ScoreRule:
    """One signed contribution to a candidate's score."""

    name: str
    weight: int
    applies: Callable[[PathRecord], bool]


def _dir_contains(*needles: str) -> Callable[[PathRecord], bool]:
    return lambda rec: any(n in rec.directory for n in needles)


_ONE_MB = 1_000_000
_HUNDRED_KB = 100_000

LOCATION_RULES: tuple[ScoreRule, ...] = (
    ScoreRule("root", 100, lambda rec: rec.directory == "."),
    ScoreRule("bin_dir", 50, _dir_contains("bin")),
    ScoreRule("completion_dir", -50, _dir_contains("completion", "bash_completion")),
    ScoreRule("doc_dir", -30, _dir_contains("doc", "man")),
    ScoreRule("example_dir", -30, _dir_contains("config", "example", "sample")),
    ScoreRule("executable", 20, lambda rec: rec.is_executable),
    ScoreRule("size_large", 10, lambda rec: rec.size > _ONE_MB),
    ScoreRule("size_medium", 5, lambda rec: _HUNDRED_KB < rec.size <= _ONE_MB),
)


def score_path(record: PathRecord, rules: Sequence[ScoreRule] = LOCATION_RULES) -> int:
    """Sum the weights of every rule that applies to ``record``."""
    return sum(rule.weight for rule in rules if rule.applies(record))


def is_demoted(record: PathRecord, rules: Sequence[ScoreRule] = LOCATION_RULES) -> bool:
    """Whether any negative path rule applies (docs, completions, samples)."""
    return any(rule.weight < 0 and rule.applies(record) for rule in rules)


def pick_best_candidate(
    records: Sequence[PathRecord],
    *,
    floor: int,
    rules: Sequence[ScoreRule] = LOCATION_RULES,
) -> BinaryCandidate | None:
    """Highest score above ``floor`` wins; ties keep the earlier record."""
    best: BinaryCandidate | None = None
    best_score = floor
    for rec in records:
        score = score_path(rec, rules)
        if score > best_score:
            best_score = score
            best = BinaryCandidate(path=rec.path, score=score)
    return best
