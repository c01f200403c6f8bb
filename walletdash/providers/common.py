from __future__ import annotations

import re
from dataclasses import dataclass

import httpx

SOLANA_KEY = "solana_devnet"
BASE_KEY = "base_sepolia"
ETH_KEY = "eth_sepolia"
CHAIN_KEYS = (SOLANA_KEY, BASE_KEY, ETH_KEY)

# Display precision per chain; deltas use the same precision.
CHAIN_DECIMALS = {
    SOLANA_KEY: 4,
    BASE_KEY: 6,
    ETH_KEY: 6,
}
CHAIN_UNITS = {
    SOLANA_KEY: "SOL",
    BASE_KEY: "ETH",
    ETH_KEY: "ETH",
}

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"^(\d+\.?\d*|\.\d+)")


class ProviderError(RuntimeError):
    pass


@dataclass(frozen=True)
class Balance:
    amount: float
    unit: str
    decimals: int

    def render(self) -> str:
        return f"{self.amount:.{self.decimals}f} {self.unit}"

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def zero(cls, chain: str) -> "Balance":
        return cls(0.0, CHAIN_UNITS[chain], CHAIN_DECIMALS[chain])


def extract_amount(value) -> float:
    """Numeric magnitude of a balance; anything unparseable counts as 0."""
    if isinstance(value, Balance):
        return value.amount
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return 0.0
    digits = _NON_NUMERIC.sub("", value)
    # "1.2.3" keeps its leading number, like a lenient float parse would.
    m = _LEADING_NUMBER.match(digits)
    if not m:
        return 0.0
    try:
        return float(m.group(0))
    except ValueError:
        return 0.0


def render_balance(value, chain: str) -> str:
    if isinstance(value, Balance):
        return value.render()
    if isinstance(value, str):
        return value
    return Balance.zero(chain).render()


async def rpc_call(client: httpx.AsyncClient, url: str, method: str, params: list):
    payload = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": method,
        "params": params,
    }
    r = await client.post(url, json=payload, headers={"Content-Type": "application/json"})
    r.raise_for_status()
    try:
        data = r.json()
    except ValueError:
        raise ProviderError(f"JSON parse error: {r.text[:200]}")
    if not isinstance(data, dict):
        raise ProviderError(f"unexpected RPC payload: {str(data)[:200]}")
    if data.get("error"):
        raise ProviderError(f"RPC error {data['error']}")
    return data.get("result")
