"""
L1 Domain — Download helpers (pure).

Size formatting and the retry backoff schedule.
No I/O, no subprocess.
"""

from __future__ import annotations


def _fmt_size(n: int | float) -> str:
    """Format byte count to human-readable string."""
    for unit in ("B", "KB", "MB", "GB"):
        if n < 1024:
            return f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} TB"


def backoff_schedule(attempts: int, initial: int) -> list[int]:
    """Waits between consecutive attempts: ``initial`` doubling each time.

    ``backoff_schedule(5, 2)`` → ``[2, 4, 8, 16]`` (no wait after the
    last attempt).
    """
    return [initial * (2 ** i) for i in range(max(attempts - 1, 0))]
