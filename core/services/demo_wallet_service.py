# =============================================================================
# core/services/demo_wallet_service.py - Demo Wallet Provider
# =============================================================================
# Serves the bundled demo wallet (core/data/demo_wallet.json).
#
# The file is parsed once per process. DemoWallet is frozen, so every caller
# gets the same immutable object and the output never varies between calls.
# =============================================================================

import json
import logging
from functools import lru_cache
from pathlib import Path

from core.models.wallet import DemoWallet

logger = logging.getLogger(__name__)

DEMO_WALLET_PATH = Path(__file__).resolve().parent.parent / "data" / "demo_wallet.json"


@lru_cache
def load_demo_wallet(path: Path = DEMO_WALLET_PATH) -> DemoWallet:
    """Parse and validate the demo wallet file."""
    with path.open(encoding="utf-8") as f:
        wallet = DemoWallet.model_validate(json.load(f))
    logger.info(f"Loaded demo wallet {wallet.address} with {len(wallet.tokens)} tokens")
    return wallet


class DemoWalletService:
    """Returns the static demo wallet. No inputs, no failure modes."""

    def __init__(self, path: Path = DEMO_WALLET_PATH):
        self.path = path

    def generate_demo_wallet(self) -> DemoWallet:
        return load_demo_wallet(self.path)


demo_wallet_service = DemoWalletService()
