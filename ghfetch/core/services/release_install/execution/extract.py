"""
L4 Execution — Archive extraction.

Dispatches on the downloaded file's name and unpacks into the scratch
directory the file was downloaded to.  Anything that is not a known
archive is taken to be the binary itself.

Failures are final: a corrupt archive will not get better on retry.
"""

from __future__ import annotations

import bz2
import logging
import shutil
import tarfile
import zipfile
from pathlib import Path

from ghfetch.core.services.release_install.errors import ExtractionError

logger = logging.getLogger(__name__)


def _extract_tar(archive: Path, dest: Path, mode: str) -> None:
    with tarfile.open(archive, mode) as tar:
        # "data" refuses absolute paths, links out of ``dest`` and device files.
        tar.extractall(dest, filter="data")


def _extract_zip(archive: Path, dest: Path) -> None:
    """Unzip, restoring the Unix permission bits zipfile leaves behind."""
    with zipfile.ZipFile(archive) as zf:
        for info in zf.infolist():
            extracted = Path(zf.extract(info, dest))
            mode = (info.external_attr >> 16) & 0o777
            if mode and not info.is_dir():
                extracted.chmod(mode)


def _decompress_bz2(archive: Path, dest: Path, binary_name: str) -> None:
    """Decompress a standalone ``.bz2`` next to the original, then rename it."""
    decompressed = dest / archive.name[: -len(".bz2")]
    with bz2.open(archive, "rb") as src, open(decompressed, "wb") as out:
        shutil.copyfileobj(src, out)
    target = dest / binary_name
    if decompressed != target:
        decompressed.replace(target)


def _copy_binary(file_path: Path, dest: Path, binary_name: str) -> None:
    target = dest / binary_name
    if file_path.resolve() != target.resolve():
        shutil.copyfile(file_path, target)


def archive_kind(file_name: str) -> str:
    """Classify a file name: tar.gz, tar.bz2, zip, bz2, or binary."""
    if file_name.endswith((".tar.gz", ".tgz")):
        return "tar.gz"
    if file_name.endswith(".tar.bz2"):
        return "tar.bz2"
    if file_name.endswith(".zip"):
        return "zip"
    if file_name.endswith(".bz2"):
        return "bz2"
    return "binary"


def extract_archive(file_path: Path, scratch_dir: Path, binary_name: str) -> Path:
    """Unpack ``file_path`` into ``scratch_dir``.

    Args:
        file_path: The downloaded asset.
        scratch_dir: Directory to unpack into (already exists).
        binary_name: Name given to single-file payloads (``.bz2`` and
            uncompressed binaries).

    Returns:
        ``scratch_dir``, now holding the extracted contents.

    Raises:
        ExtractionError: The archive is corrupt or cannot be unpacked.
    """
    kind = archive_kind(file_path.name)
    try:
        if kind == "tar.gz":
            logger.info("Extracting tar.gz archive...")
            _extract_tar(file_path, scratch_dir, "r:gz")
        elif kind == "tar.bz2":
            logger.info("Extracting tar.bz2 archive...")
            _extract_tar(file_path, scratch_dir, "r:bz2")
        elif kind == "zip":
            logger.info("Extracting zip archive...")
            _extract_zip(file_path, scratch_dir)
        elif kind == "bz2":
            logger.info("Extracting bz2 archive...")
            _decompress_bz2(file_path, scratch_dir, binary_name)
        else:
            logger.info("Treating as uncompressed binary...")
            _copy_binary(file_path, scratch_dir, binary_name)
    except (tarfile.TarError, zipfile.BadZipFile, OSError, EOFError, ValueError) as exc:
        raise ExtractionError(
            f"Failed to extract {kind} archive {file_path.name}: {exc}",
        ) from exc

    return scratch_dir
