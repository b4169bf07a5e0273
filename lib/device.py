# =============================================================================
# lib/device.py - Device Capability Helpers
# =============================================================================
# Classifies the calling browser so the frontend can cap how many heavy
# elements (charts, token cards) it renders.
#
# Inputs are the User-Agent string and the reported logical core count
# (navigator.hardwareConcurrency). Everything here is a pure function.
# =============================================================================

import re
from typing import Literal

PerformanceLevel = Literal["low", "medium", "high"]

MOBILE_UA_PATTERN = re.compile(
    r"Android|webOS|iPhone|iPad|iPod|BlackBerry|IEMobile|Opera Mini",
    re.IGNORECASE,
)

# Browsers that do not report hardwareConcurrency are treated as dual-core
DEFAULT_CORES = 2

# (max cores for "low", max cores for "medium"); anything above is "high"
MOBILE_THRESHOLDS = (4, 6)
DESKTOP_THRESHOLDS = (2, 6)

RENDER_CAPS: dict[str, int | None] = {
    "low": 10,
    "medium": 20,
    "high": None,
}


def is_mobile_device(user_agent: str | None) -> bool:
    """Check whether the user agent belongs to a phone or tablet."""
    if not user_agent:
        return False
    return MOBILE_UA_PATTERN.search(user_agent) is not None


def get_device_performance_level(
    user_agent: str | None,
    cores: int | None = None,
) -> PerformanceLevel:
    """
    Classify the device as low / medium / high performance.

    Without a user agent there is no calling browser to inspect, so the
    answer is "medium".

    Examples:
        get_device_performance_level("... iPhone ...", 2)     # "low"
        get_device_performance_level("... Windows NT ...", 8)  # "high"
    """
    if user_agent is None:
        return "medium"

    core_count = cores or DEFAULT_CORES
    low_max, medium_max = (
        MOBILE_THRESHOLDS if is_mobile_device(user_agent) else DESKTOP_THRESHOLDS
    )

    if core_count <= low_max:
        return "low"
    if core_count <= medium_max:
        return "medium"
    return "high"


def get_optimal_render_count(
    element_count: int,
    user_agent: str | None = None,
    cores: int | None = None,
    level: PerformanceLevel | None = None,
) -> int:
    """
    Cap a requested element count for the device.

    Pass `level` directly when it is already known; otherwise it is derived
    from `user_agent` and `cores`.
    """
    performance = level or get_device_performance_level(user_agent, cores)
    cap = RENDER_CAPS[performance]
    return element_count if cap is None else min(element_count, cap)
