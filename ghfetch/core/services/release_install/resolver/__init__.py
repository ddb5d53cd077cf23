"""
L2 Resolver — read-only lookups against the release feed.
"""

from ghfetch.core.services.release_install.resolver.catalog import (  # noqa: F401
    fetch_release_assets,
)
from ghfetch.core.services.release_install.resolver.version_resolution import (  # noqa: F401
    fetch_latest_version,
    resolve_version,
)
