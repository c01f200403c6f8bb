import time
import uuid
from datetime import datetime

import structlog

from ..config import Settings
from ..logging import run_context
from ..json_store import JsonStore, SNAPSHOTS_KEY, LATEST_KEY, ACTIVITY_KEY
from ..providers.balance_provider import BalanceProvider
from ..utils import now_utc, utc_date_str
from .snapshots import load_series, build_snapshot, upsert_snapshot, snapshot_document
from .metrics import build_latest_summary
from .activity import load_entries, record_daily_entry, activity_document
from .validation import validate_snapshot, SnapshotValidationError

log = structlog.get_logger()

def run_daily_update(
    config: Settings,
    store: JsonStore | None = None,
    provider: BalanceProvider | None = None,
    now: datetime | None = None,
    run_id: str | None = None,
) -> dict:
    """
    One dashboard update: fetch balances, merge today's snapshot into history,
    rewrite latest.json and append the daily activity entry if missing.
    Fetch failures degrade to defaults inside the provider; anything raised
    here is fatal for the run.
    """
    run_id = run_id or str(uuid.uuid4())
    store = store or JsonStore(config.data_dir)
    provider = provider or BalanceProvider(config)
    now = now or now_utc()
    today = utc_date_str(now)

    def _step_start(step: str):
        log.info("update_step_start", step=step)
        return time.monotonic()

    def _step_done(step: str, started: float, **fields):
        log.info(
            "update_step_done",
            step=step,
            elapsed_sec=round(time.monotonic() - started, 2),
            **fields,
        )

    with run_context(run_id, today):
        log.info("update_started", data_dir=str(store.root_dir))
        try:
            # Prior state is read once up front; unreadable documents count as empty.
            snapshots_doc = store.read(SNAPSHOTS_KEY)
            activity_doc = store.read(ACTIVITY_KEY)

            # 1) Balances and reference price
            started = _step_start("fetch_balances")
            report = provider.fetch_balances()
            balances = report.by_chain()
            _step_done(
                "fetch_balances",
                started,
                balances={k: str(v) for k, v in balances.items()},
                eth_price_usd=report.eth_price,
            )

            # 2) Merge today's snapshot into the series
            started = _step_start("update_snapshots")
            snapshot = build_snapshot(today, balances, report.eth_price)
            ok, reasons = validate_snapshot(snapshot)
            if not ok:
                log.error("snapshot_validation_failed", reasons=reasons)
                raise SnapshotValidationError(reasons)
            series = upsert_snapshot(load_series(snapshots_doc), snapshot, config.snapshot_retention)
            store.write(SNAPSHOTS_KEY, snapshot_document(snapshots_doc, series))
            _step_done("update_snapshots", started, entries=len(series))

            # 3) Derived summary
            started = _step_start("update_latest")
            latest = build_latest_summary(series, balances, now)
            store.write(LATEST_KEY, latest)
            _step_done("update_latest", started, streak_days=latest["streak_days"])

            # 4) Activity log, at most one daily entry per date
            started = _step_start("update_activity_log")
            entries, added = record_daily_entry(
                load_entries(activity_doc),
                today,
                balances,
                config.activity_retention,
            )
            if added:
                store.write(ACTIVITY_KEY, activity_document(activity_doc, entries))
            _step_done("update_activity_log", started, added=added, entries=len(entries))

            log.info("update_finished", status="succeeded")
        except Exception as e:
            log.error("update_failed", err=str(e))
            raise
    return {
        "run_id": run_id,
        "date": today,
        "snapshots": len(series),
        "streak_days": latest["streak_days"],
        "activity_added": added,
        "latest": latest,
    }
