from __future__ import annotations

import httpx

from .common import Balance, rpc_call

WEI_PER_ETH = 1e18


class EvmAdapter:
    def __init__(self, rpc_url: str, address: str, decimals: int = 6, unit: str = "ETH"):
        self.rpc_url = rpc_url
        self.address = address
        self.decimals = decimals
        self.unit = unit

    async def balance(self, client: httpx.AsyncClient) -> Balance:
        result = await rpc_call(client, self.rpc_url, "eth_getBalance", [self.address, "latest"])
        wei = int(result or "0x0", 16)
        return Balance(wei / WEI_PER_ETH, self.unit, self.decimals)
