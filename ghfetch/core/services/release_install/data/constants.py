"""
L0 Data — Module-level constants.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# ── Release feed ─────────────────────────────────────────────

# Single-shot API requests (latest release, tag lookups).
API_TIMEOUT_SECONDS = 10
API_ACCEPT = "application/vnd.github+json"
USER_AGENT = "ghfetch/0.1 (+https://github.com)"

# ── Download ─────────────────────────────────────────────────

DOWNLOAD_CONNECT_TIMEOUT = 10      # seconds, also bounds each socket read
DOWNLOAD_TOTAL_TIMEOUT = 300       # seconds, whole attempt
DOWNLOAD_MAX_ATTEMPTS = 5
DOWNLOAD_INITIAL_BACKOFF = 2       # doubles after every failed attempt
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# ── Asset scoring ────────────────────────────────────────────

# Most specific suffix first: ``.tar.gz`` must be tested before ``.gz``
# and ``.tar.bz2`` before ``.bz2``.
EXTENSION_SCORES: tuple[tuple[str, int], ...] = (
    (".tar.gz", 10),
    (".tgz", 9),
    (".zip", 8),
    (".tar.bz2", 7),
    (".bz2", 6),
)
DEFAULT_EXTENSION_SCORE = 5

SHORT_NAME_LIMIT = 50
SHORT_NAME_BONUS = 3
SOURCE_MARKERS = ("src", "source")
NOT_SOURCE_BONUS = 2

# ── Binary location ──────────────────────────────────────────

# A scored candidate must beat this to be selected; anything at or
# below it is left to the last-resort phase.
LOCATE_SCORE_FLOOR = -1

LISTING_MAX_FILES = 20
LISTING_MAX_DIRS = 10

# ── Install / verify ─────────────────────────────────────────

DEFAULT_INSTALL_DIR = "/usr/local/bin"
DEFAULT_USER_BIN_DIR = "~/.local/bin"
DEFAULT_GIT_SERVER = "github.com"

VERSION_FLAGS: tuple[str, ...] = ("--version", "-version", "version", "-V", "-v")
VERIFY_TIMEOUT_SECONDS = 10
PRIVILEGE_PROBE_TIMEOUT = 60       # interactive sudo waits for a password
