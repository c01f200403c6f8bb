from __future__ import annotations

import httpx


class CoinGeckoAdapter:
    def __init__(self, price_url: str, default_price: float, coin_id: str = "ethereum"):
        self.price_url = price_url
        self.default_price = default_price
        self.coin_id = coin_id

    async def price_usd(self, client: httpx.AsyncClient) -> float:
        r = await client.get(
            self.price_url,
            headers={"Accept": "application/json", "User-Agent": "walletdash/1.0"},
        )
        r.raise_for_status()
        data = r.json()
        price = ((data or {}).get(self.coin_id) or {}).get("usd")
        if price is None:
            return self.default_price
        return float(price)
