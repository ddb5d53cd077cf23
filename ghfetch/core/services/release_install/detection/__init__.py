"""
L3 Detection — read-only probes of the host.
"""

from ghfetch.core.services.release_install.detection.platform import (  # noqa: F401
    detect_arch,
    detect_os,
)
from ghfetch.core.services.release_install.detection.privilege import (  # noqa: F401
    PrivilegeExecutor,
    detect_privilege_mode,
    resolve_privilege,
)
from ghfetch.core.services.release_install.detection.tool_version import (  # noqa: F401
    find_on_path,
    get_binary_version,
)
