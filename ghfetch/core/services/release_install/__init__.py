"""
Release install service — package re-exports.

Resolve, download and install a platform binary from a release feed::

    from ghfetch.core.services.release_install import install_release

Each symbol lives in its single-responsibility module inside the
appropriate onion layer (data → domain → resolver → detection →
execution → orchestration).
"""

# ── Errors ──
from ghfetch.core.services.release_install.errors import (  # noqa: F401
    ExtractionError,
    InstallError,
    InstallPermissionError,
    LocateError,
    NetworkError,
    NotFoundError,
    ReleaseInstallError,
    ValidationError,
)

# ── L2: Resolver ──
from ghfetch.core.services.release_install.resolver.catalog import (  # noqa: F401
    fetch_release_assets,
)
from ghfetch.core.services.release_install.resolver.version_resolution import (  # noqa: F401
    resolve_version,
)

# ── L3: Detection ──
from ghfetch.core.services.release_install.detection.platform import (  # noqa: F401
    detect_arch,
    detect_os,
)

# ── L5: Orchestration ──
from ghfetch.core.services.release_install.orchestration.orchestrator import (  # noqa: F401
    AssetSelection,
    install_release,
    select_release_asset,
)
