from __future__ import annotations

import structlog

from ..providers.common import SOLANA_KEY, BASE_KEY, ETH_KEY, render_balance
from .validation import DAILY_ENTRY_TYPE

log = structlog.get_logger()

ACTIVITY_RETENTION = 60
DAILY_ENTRY_EMOJI = "ð"


def load_entries(document) -> list[dict]:
    if not isinstance(document, dict):
        return []
    raw = document.get("entries")
    if not isinstance(raw, list):
        return []
    entries = [e for e in raw if isinstance(e, dict)]
    if len(entries) != len(raw):
        log.warning("activity_entries_dropped", dropped=len(raw) - len(entries), kept=len(entries))
    return entries


def render_daily_message(balances: dict) -> str:
    sol = render_balance(balances.get(SOLANA_KEY), SOLANA_KEY)
    base = render_balance(balances.get(BASE_KEY), BASE_KEY)
    eth = render_balance(balances.get(ETH_KEY), ETH_KEY)
    return f"Daily snapshot recorded — SOL: {sol} | Base: {base} | ETH: {eth} {DAILY_ENTRY_EMOJI}"


def has_daily_entry(entries: list[dict], date: str) -> bool:
    return any(e.get("date") == date and e.get("type") == DAILY_ENTRY_TYPE for e in entries)


def record_daily_entry(
    entries: list[dict] | None,
    date: str,
    balances: dict,
    retention: int = ACTIVITY_RETENTION,
) -> tuple[list[dict], bool]:
    """Append today's daily-snapshot entry unless one exists. Returns (entries, added)."""
    entries = list(entries or [])
    if has_daily_entry(entries, date):
        return entries, False
    entries.append({
        "date": date,
        "type": DAILY_ENTRY_TYPE,
        "message": render_daily_message(balances),
        "emoji": DAILY_ENTRY_EMOJI,
    })
    if retention < 1:
        raise ValueError(f"retention must be positive, got {retention}")
    return entries[-retention:], True


def activity_document(document, entries: list[dict]) -> dict:
    out = dict(document) if isinstance(document, dict) else {}
    out["entries"] = entries
    return out
