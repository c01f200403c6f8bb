from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx
import structlog

from ..config import Settings
from ..utils import retry_call
from .common import Balance, SOLANA_KEY, BASE_KEY, ETH_KEY, CHAIN_DECIMALS
from .solana_adapter import SolanaAdapter
from .evm_adapter import EvmAdapter
from .coingecko_adapter import CoinGeckoAdapter

log = structlog.get_logger()


@dataclass(frozen=True)
class BalanceReport:
    solana: Balance
    base: Balance
    eth: Balance
    eth_price: float

    def by_chain(self) -> dict:
        return {
            SOLANA_KEY: self.solana,
            BASE_KEY: self.base,
            ETH_KEY: self.eth,
        }


class BalanceProvider:
    """
    Current balances for the three tracked wallets plus the ETH/USD price.
    - All four lookups run concurrently on one AsyncClient
    - Each lookup fails on its own: errors and timeouts are logged and the
      safe default is used, so fetch_balances never raises for network trouble
    """
    def __init__(self, config: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.transport = transport
        self.solana = SolanaAdapter(config.solana_rpc, config.solana_wallet)
        self.base = EvmAdapter(config.base_rpc, config.base_wallet, decimals=CHAIN_DECIMALS[BASE_KEY])
        self.eth = EvmAdapter(config.eth_rpc, config.eth_wallet, decimals=CHAIN_DECIMALS[ETH_KEY])
        self.price = CoinGeckoAdapter(config.price_url, config.default_eth_price)

    def fetch_balances(self) -> BalanceReport:
        return asyncio.run(self.afetch_balances())

    async def afetch_balances(self) -> BalanceReport:
        async with httpx.AsyncClient(
            timeout=self.config.http_timeout_seconds,
            transport=self.transport,
        ) as client:
            solana, base, eth, price = await asyncio.gather(
                self._guarded(SOLANA_KEY, lambda: self.solana.balance(client), Balance.zero(SOLANA_KEY)),
                self._guarded(BASE_KEY, lambda: self.base.balance(client), Balance.zero(BASE_KEY)),
                self._guarded(ETH_KEY, lambda: self.eth.balance(client), Balance.zero(ETH_KEY)),
                self._guarded(
                    "eth_price_usd",
                    lambda: self.price.price_usd(client),
                    self.config.default_eth_price,
                    kind="price",
                ),
            )
        return BalanceReport(solana=solana, base=base, eth=eth, eth_price=price)

    async def _guarded(self, label: str, fetch_fn, default, kind: str = "balance"):
        async def _call():
            return await asyncio.wait_for(fetch_fn(), timeout=self.config.fetch_timeout_seconds)

        try:
            value = await retry_call(
                _call,
                attempts=self.config.http_retry_attempts,
                base_delay=self.config.http_retry_backoff_seconds,
            )
        except asyncio.TimeoutError:
            log.warning(f"{kind}_fetch_failed", source=label, err="timeout", default=str(default))
            return default
        except Exception as e:
            log.warning(f"{kind}_fetch_failed", source=label, err=str(e), default=str(default))
            return default
        log.info(f"{kind}_fetched", source=label, value=str(value))
        return value
