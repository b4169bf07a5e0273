# =============================================================================
# core/services/portfolio_service.py - Wallet Portfolio Lookup
# =============================================================================
# Builds a Portfolio snapshot for a Solana wallet from the OKX balance APIs:
# - balance/total-value for the headline USD value
# - balance/all-token-balances-by-address for individual positions
#
# Upstream errors are not swallowed; the route decides how to report them.
# =============================================================================

import logging

from core.models.portfolio import Portfolio, PortfolioToken
from lib.okx_client import OKXClient, get_okx_client
from lib.utils import to_float

logger = logging.getLogger(__name__)

SOLANA_CHAIN_INDEX = "501"


class PortfolioService:
    """
    Portfolio lookups backed by OKX.

    Example:
        portfolio = PortfolioService().get_portfolio("7xKX...")
        print(portfolio.total_value)
    """

    def __init__(self, client: OKXClient | None = None):
        self._client = client

    @property
    def client(self) -> OKXClient:
        # Injected client, else the shared one (reset by close_okx_client on shutdown)
        if self._client is not None:
            return self._client
        return get_okx_client()

    def get_portfolio(self, wallet_address: str, chain_index: str = SOLANA_CHAIN_INDEX) -> Portfolio:
        """
        Fetch total value and token positions for a wallet.

        Args:
            wallet_address: Wallet to inspect
            chain_index: OKX chain index (default Solana)

        Returns:
            Portfolio with one PortfolioToken per token asset

        Raises:
            OKXAPIError: If either upstream call fails
        """
        logger.info(f"Fetching portfolio for wallet: {wallet_address}")

        total_value = self.client.get_total_value(wallet_address, chain_index)
        balances = self.client.get_all_token_balances(wallet_address, [chain_index])

        tokens = []
        for asset in balances:
            balance = to_float(asset.get("balance"))
            price = to_float(asset.get("tokenPrice"))
            tokens.append(
                PortfolioToken(
                    symbol=asset.get("symbol", ""),
                    address=asset.get("tokenContractAddress", ""),
                    balance=balance,
                    value=balance * price,
                    price=price,
                    # balance endpoints carry no 24h change
                    change24h=0.0,
                )
            )

        logger.info(f"Portfolio fetched: ${total_value:.2f} across {len(tokens)} tokens")
        return Portfolio(total_value=total_value, tokens=tokens)


portfolio_service = PortfolioService()
