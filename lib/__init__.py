# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - okx_client.py: Typed OKX Web3 DEX client (signing, envelopes, errors)
# - device.py: Device capability helpers (mobile detection, render caps)
# - trading_prompts.py: Canned chat prompt templates
# - utils.py: Shared utilities (delegate error base, time, number parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import ServiceError, to_float, utc_now_iso

__all__ = [
    "ServiceError",
    "to_float",
    "utc_now_iso",
]
