"""
Fetch on-chain balances and update the dashboard JSON files.

Usage:
  python scripts/update_daily.py [--data-dir DIR]

Intended for a daily cron (09:00 UTC). Writes data/daily-snapshots.json,
data/latest.json and data/activity-log.json. Exits 1 on any fatal error.
"""
from pathlib import Path
import argparse
import os
import sys
import uuid

# Ensure repo root is on sys.path and is the working directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.chdir(ROOT)

import structlog

from walletdash.logging import setup_logging
from walletdash.config import settings
from walletdash.pipeline.orchestrator import run_daily_update

log = structlog.get_logger()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Daily dashboard update")
    parser.add_argument("--data-dir", help="Directory holding the JSON documents (default: DATA_DIR)")
    args = parser.parse_args(argv)

    setup_logging()
    config = settings.model_copy(update={"data_dir": args.data_dir}) if args.data_dir else settings
    run_id = str(uuid.uuid4())
    try:
        result = run_daily_update(config, run_id=run_id)
    except Exception:
        log.exception("update_fatal", run_id=run_id)
        return 1
    print(f"Done. {result['snapshots']} snapshots, streak {result['streak_days']} days.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
