"""ghfetch — install release binaries straight from GitHub."""

__version__ = "0.1.0"
