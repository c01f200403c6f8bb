from __future__ import annotations

import httpx

from .common import Balance, rpc_call, SOLANA_KEY, CHAIN_DECIMALS

LAMPORTS_PER_SOL = 1e9


class SolanaAdapter:
    def __init__(self, rpc_url: str, address: str):
        self.rpc_url = rpc_url
        self.address = address

    async def balance(self, client: httpx.AsyncClient) -> Balance:
        result = await rpc_call(client, self.rpc_url, "getBalance", [self.address])
        lamports = (result or {}).get("value") if isinstance(result, dict) else None
        lamports = lamports or 0
        return Balance(int(lamports) / LAMPORTS_PER_SOL, "SOL", CHAIN_DECIMALS[SOLANA_KEY])
