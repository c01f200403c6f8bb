from __future__ import annotations

import structlog

from ..providers.common import CHAIN_KEYS, render_balance
from ..utils import parse_date

log = structlog.get_logger()

SNAPSHOT_RETENTION = 90
DEFAULT_TASKS_COMPLETED = 0
DEFAULT_TASKS_ACTIVE = 5


def load_series(document) -> list[dict]:
    """Coerce a stored snapshot document into a series; anything malformed counts as no history."""
    if not isinstance(document, dict):
        return []
    raw = document.get("snapshots")
    if not isinstance(raw, list):
        if raw is not None:
            log.warning("snapshot_document_malformed", snapshots_type=type(raw).__name__)
        return []
    by_date = {}
    dropped = 0
    for entry in raw:
        if not isinstance(entry, dict) or parse_date(entry.get("date")) is None:
            dropped += 1
            continue
        # Later duplicates of a date win.
        by_date[entry["date"]] = entry
    duplicates = len(raw) - dropped - len(by_date)
    if dropped or duplicates:
        log.warning("snapshot_entries_dropped", dropped=dropped, duplicates=duplicates, kept=len(by_date))
    return [by_date[d] for d in sorted(by_date)]


def build_snapshot(today: str, balances: dict, eth_price: float) -> dict:
    return {
        "date": today,
        "balances": {key: render_balance(balances.get(key), key) for key in CHAIN_KEYS},
        "eth_price_usd": eth_price,
        "tasks_completed": DEFAULT_TASKS_COMPLETED,
        "tasks_active": DEFAULT_TASKS_ACTIVE,
        "milestone": None,
    }


def upsert_snapshot(
    series: list[dict] | None,
    snapshot: dict,
    retention: int = SNAPSHOT_RETENTION,
) -> list[dict]:
    """
    Replace any entry for snapshot["date"] with snapshot, keep one entry per
    date (the last one seen), ascending date order and the most recent
    `retention` entries. Pure: the input list is not modified.
    """
    if retention < 1:
        raise ValueError(f"retention must be positive, got {retention}")
    by_date = {}
    for s in (series or []):
        by_date[s.get("date") or ""] = s
    by_date[snapshot["date"]] = snapshot
    kept = [by_date[d] for d in sorted(by_date)]
    return kept[-retention:]


def upsert_today(
    series: list[dict] | None,
    balances: dict,
    eth_price: float,
    today: str,
    retention: int = SNAPSHOT_RETENTION,
) -> list[dict]:
    return upsert_snapshot(series, build_snapshot(today, balances, eth_price), retention)


def snapshot_document(document, series: list[dict]) -> dict:
    out = dict(document) if isinstance(document, dict) else {}
    out["snapshots"] = series
    return out


def previous_snapshot(series: list[dict], today: str) -> dict | None:
    earlier = [s for s in series if (s.get("date") or "") < today]
    return earlier[-1] if earlier else None
