#!/usr/bin/env python3
"""
Invariant checks for the dashboard data files.

Checks the snapshot series (unique dates, ascending order, retention bound),
the activity log (one daily-snapshot entry per date, retention bound) and
that latest.json carries every chain.

Usage:
    python scripts/verify_data.py [--data-dir DIR]
"""
from pathlib import Path
import argparse
import os
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.chdir(ROOT)

from walletdash.config import settings
from walletdash.json_store import JsonStore, SNAPSHOTS_KEY, LATEST_KEY, ACTIVITY_KEY
from walletdash.pipeline.validation import validate_snapshot, validate_series, validate_activity
from walletdash.providers.common import CHAIN_KEYS


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Verify dashboard data invariants.")
    p.add_argument("--data-dir", default=settings.data_dir)
    args = p.parse_args(argv)

    store = JsonStore(args.data_dir)
    errors = []
    warnings = []

    # Check 1: snapshot series
    doc = store.read(SNAPSHOTS_KEY)
    if doc is None:
        warnings.append(f"{store.path_for(SNAPSHOTS_KEY)} missing or unreadable")
    else:
        series = doc.get("snapshots") if isinstance(doc, dict) else None
        if not isinstance(series, list):
            errors.append("snapshots is not a list")
        else:
            _, reasons = validate_series(series, settings.snapshot_retention)
            errors.extend(reasons)
            for snap in series:
                ok, snap_reasons = validate_snapshot(snap)
                if not ok:
                    label = snap.get("date") if isinstance(snap, dict) else "?"
                    warnings.extend(f"{label}: {r}" for r in snap_reasons)

    # Check 2: activity log
    doc = store.read(ACTIVITY_KEY)
    if doc is None:
        warnings.append(f"{store.path_for(ACTIVITY_KEY)} missing or unreadable")
    else:
        entries = doc.get("entries") if isinstance(doc, dict) else None
        if not isinstance(entries, list):
            errors.append("entries is not a list")
        else:
            _, reasons = validate_activity(entries, settings.activity_retention)
            errors.extend(reasons)

    # Check 3: latest summary
    latest = store.read(LATEST_KEY)
    if not isinstance(latest, dict):
        warnings.append(f"{store.path_for(LATEST_KEY)} missing or unreadable")
    else:
        for section in ("balances", "daily_change"):
            missing = [k for k in CHAIN_KEYS if k not in (latest.get(section) or {})]
            if missing:
                errors.append(f"latest.{section} missing {', '.join(missing)}")
        streak = latest.get("streak_days")
        if not isinstance(streak, int) or streak < 1:
            errors.append(f"latest.streak_days invalid: {streak!r}")

    for w in warnings:
        print(f"WARN  {w}")
    for e in errors:
        print(f"ERROR {e}")
    if errors:
        print(f"\n{len(errors)} error(s).")
        return 1
    print("\nAll invariants hold.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
