from typing import Tuple, List

from ..providers.common import CHAIN_KEYS
from ..utils import parse_date

CRITICAL_PATHS = [
    "date",
    "balances.solana_devnet",
    "balances.base_sepolia",
    "balances.eth_sepolia",
    "eth_price_usd",
]

DAILY_ENTRY_TYPE = "daily-snapshot"


class SnapshotValidationError(ValueError):
    def __init__(self, reasons: List[str]):
        super().__init__("; ".join(reasons))
        self.reasons = reasons


def _get(path: str, obj: dict):
    cur = obj
    for part in path.split("."):
        if not isinstance(cur, dict):
            return None
        cur = cur.get(part)
    return cur

def validate_snapshot(snap: dict, critical_paths: List[str] | None = None) -> Tuple[bool, List[str]]:
    if not isinstance(snap, dict):
        return False, ["snapshot is not an object"]
    reasons = []
    paths = critical_paths or CRITICAL_PATHS
    for path in paths:
        if _get(path, snap) is None:
            reasons.append(f"missing {path}")
    if snap.get("date") is not None and parse_date(snap.get("date")) is None:
        reasons.append(f"date {snap.get('date')!r} is not YYYY-MM-DD")
    balances = snap.get("balances")
    if isinstance(balances, dict):
        for key in balances:
            if key not in CHAIN_KEYS:
                reasons.append(f"unknown chain {key}")
    price = snap.get("eth_price_usd")
    if price is not None and (isinstance(price, bool) or not isinstance(price, (int, float))):
        reasons.append("eth_price_usd is not numeric")
    return (len(reasons) == 0), reasons

def validate_series(series: list, retention: int = 90) -> Tuple[bool, List[str]]:
    reasons = []
    dates = [s.get("date") for s in series if isinstance(s, dict)]
    if len(dates) != len(series):
        reasons.append("series contains non-object entries")
    seen = set()
    for d in dates:
        if d in seen:
            reasons.append(f"duplicate date {d}")
        seen.add(d)
    if any(not isinstance(d, str) for d in dates):
        reasons.append("series contains entries without a date")
    elif dates != sorted(dates):
        reasons.append("series is not in ascending date order")
    if len(series) > retention:
        reasons.append(f"series has {len(series)} entries > {retention}")
    return (len(reasons) == 0), reasons

def validate_activity(entries: list, retention: int = 60) -> Tuple[bool, List[str]]:
    reasons = []
    seen = set()
    for entry in entries:
        if not isinstance(entry, dict):
            reasons.append("activity log contains non-object entries")
            continue
        if entry.get("type") != DAILY_ENTRY_TYPE:
            continue
        d = entry.get("date")
        if d in seen:
            reasons.append(f"duplicate {DAILY_ENTRY_TYPE} entry for {d}")
        seen.add(d)
    if len(entries) > retention:
        reasons.append(f"activity log has {len(entries)} entries > {retention}")
    return (len(reasons) == 0), reasons
