"""
L5 Orchestration — the install pipeline.
"""

from ghfetch.core.services.release_install.orchestration.orchestrator import (  # noqa: F401
    AssetSelection,
    install_release,
    scratch_directory,
    select_release_asset,
    verify_installation,
)
