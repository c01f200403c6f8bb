from __future__ import annotations

from datetime import datetime

from ..providers.common import CHAIN_KEYS, CHAIN_DECIMALS, extract_amount, render_balance
from ..utils import parse_date, to_utc_iso_millis, utc_date_str
from .snapshots import previous_snapshot


def _format_delta(val: float, precision: int) -> str:
    # Zero (including -0.0) is reported as a gain: "+0.0000".
    if val == 0:
        val = 0.0
    sign = "+" if val >= 0 else ""
    return f"{sign}{val:.{precision}f}"


def compute_delta(previous: dict | None, current: dict) -> dict:
    """Signed per-chain change; a missing previous snapshot counts as all zero."""
    previous = previous if isinstance(previous, dict) else {}
    current = current if isinstance(current, dict) else {}
    out = {}
    for key in CHAIN_KEYS:
        diff = extract_amount(current.get(key)) - extract_amount(previous.get(key))
        out[key] = _format_delta(diff, CHAIN_DECIMALS[key])
    return out


def compute_streak(series: list[dict]) -> int:
    """
    Consecutive calendar days with a snapshot, counted backwards from the most
    recent date. Stops at the first gap; older gaps never matter.
    """
    dates = sorted({d for d in (parse_date(s.get("date")) for s in series) if d is not None}, reverse=True)
    streak = 1
    for later, earlier in zip(dates, dates[1:]):
        if (later - earlier).days == 1:
            streak += 1
        else:
            break
    return streak


def build_latest_summary(series: list[dict], current_balances: dict, now: datetime) -> dict:
    today = utc_date_str(now)
    baseline = previous_snapshot(series, today)
    balances = {key: render_balance(current_balances.get(key), key) for key in CHAIN_KEYS}
    return {
        "last_updated": to_utc_iso_millis(now),
        "balances": balances,
        "daily_change": compute_delta((baseline or {}).get("balances"), current_balances),
        "streak_days": compute_streak(series),
        "total_tasks_completed": 0,
    }
