"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

from ghfetch.core.services.release_install.domain.asset_matching import (  # noqa: F401
    filter_by_patterns,
    filter_by_substring,
    match_assets,
)
from ghfetch.core.services.release_install.domain.asset_scoring import (  # noqa: F401
    score_asset_name,
    score_assets,
    select_best_asset,
)
from ghfetch.core.services.release_install.domain.binary_scoring import (  # noqa: F401
    LOCATION_RULES,
    PathRecord,
    ScoreRule,
    is_demoted,
    pick_best_candidate,
    score_path,
)
from ghfetch.core.services.release_install.domain.download_helpers import (  # noqa: F401
    _fmt_size,
    backoff_schedule,
)
from ghfetch.core.services.release_install.domain.input_validation import (  # noqa: F401
    _validate_binary_name,
    _validate_repository,
    split_repository,
)
from ghfetch.core.services.release_install.domain.platform import (  # noqa: F401
    build_platform_spec,
    canonical_arch,
    canonical_os,
)
