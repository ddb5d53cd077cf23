"""
L4 Execution — Finding the binary in the extracted tree.

With an explicit subdirectory only ``subdirectory/binary`` is checked.
Otherwise the search runs in phases and stops at the first hit:

    1. ``binary`` at the extraction root
    2. first executable ``binary`` outside doc/completion/sample dirs
    3. every ``binary`` scored by location (see domain.binary_scoring)
    4. first file named ``binary`` anywhere

Search order is a pre-order walk with entries sorted by name, so the
same archive always produces the same answer.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ghfetch.core.services.release_install.data.constants import (
    LISTING_MAX_DIRS,
    LISTING_MAX_FILES,
    LOCATE_SCORE_FLOOR,
)
from ghfetch.core.services.release_install.domain.binary_scoring import (
    PathRecord,
    is_demoted,
    pick_best_candidate,
)
from ghfetch.core.services.release_install.errors import LocateError

logger = logging.getLogger(__name__)


def _walk(root: Path) -> Iterator[Path]:
    """Yield every entry under ``root``, pre-order, sorted by name.

    Symlinked directories are not followed.
    """
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError:
        return
    for entry in entries:
        yield entry
        if entry.is_dir() and not entry.is_symlink():
            yield from _walk(entry)


def _record(root: Path, path: Path) -> PathRecord:
    rel = path.relative_to(root).as_posix()
    parent = Path(rel).parent.as_posix()
    return PathRecord(
        path=rel,
        directory=parent,
        is_executable=os.access(path, os.X_OK),
        size=path.stat().st_size,
    )


def _named_files(root: Path, binary_name: str) -> list[PathRecord]:
    return [
        _record(root, p)
        for p in _walk(root)
        if p.name == binary_name and p.is_file()
    ]


def _tree_listing(root: Path) -> list[str]:
    """Capped listing of files and directories for error output."""
    files: list[str] = []
    dirs: list[str] = []
    for p in _walk(root):
        rel = "./" + p.relative_to(root).as_posix()
        if p.is_dir():
            if len(dirs) < LISTING_MAX_DIRS:
                dirs.append(rel)
        elif len(files) < LISTING_MAX_FILES:
            files.append(rel)
    return (
        ["Available files:"]
        + [f"  {f}" for f in files]
        + ["Available directories:"]
        + [f"  {d}" for d in dirs]
    )


def _locate_in_subdir(root: Path, binary_name: str, subdir: str) -> Path:
    directory = root / subdir
    candidate = directory / binary_name
    if candidate.is_file():
        return candidate

    details = [f"Available contents in '{subdir}':"]
    if directory.is_dir():
        details.extend(f"  {p.name}{'/' if p.is_dir() else ''}" for p in sorted(directory.iterdir()))
    else:
        details.append("  (directory does not exist)")
    raise LocateError(
        f"Binary '{binary_name}' not found in specified directory '{subdir}'",
        details=details,
    )


def locate_binary(scratch_dir: Path, binary_name: str, extracted_dir: str | None = None) -> Path:
    """Find the binary inside ``scratch_dir``.

    Raises:
        LocateError: No file named ``binary_name`` could be found.
            ``details`` lists what the archive did contain.
    """
    if extracted_dir:
        return _locate_in_subdir(scratch_dir, binary_name, extracted_dir)

    # Phase 1: the root.
    at_root = scratch_dir / binary_name
    if at_root.is_file():
        logger.debug("Found binary at extraction root")
        return at_root

    records = _named_files(scratch_dir, binary_name)
    logger.debug("Candidates named '%s': %s", binary_name, [r.path for r in records])

    # Phase 2: executables, skipping docs/completions/samples.
    for rec in records:
        if rec.is_executable and not is_demoted(rec):
            logger.debug("Found executable: %s", rec.path)
            return scratch_dir / rec.path

    # Phase 3: score by location.
    best = pick_best_candidate(records, floor=LOCATE_SCORE_FLOOR)
    if best is not None:
        logger.debug("Selected best candidate: %s (score: %d)", best.path, best.score)
        return scratch_dir / best.path

    # Phase 4: anything with the right name.
    if records:
        logger.debug("Last resort: %s", records[0].path)
        return scratch_dir / records[0].path

    raise LocateError(
        f"Binary '{binary_name}' not found in extracted files",
        details=_tree_listing(scratch_dir),
    )
