import asyncio
import re
from datetime import datetime, date, timezone

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def now_utc() -> datetime:
    return datetime.now(timezone.utc)

def to_utc_iso_millis(dt: datetime) -> str:
    """Render as e.g. 2026-01-05T09:00:00.123Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def utc_date_str(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).date().isoformat()

def parse_date(value) -> date | None:
    if not isinstance(value, str) or not DATE_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None

async def retry_call(
    fn,
    *,
    attempts: int = 1,
    base_delay: float = 1.0,
    max_delay: float = 5.0,
):
    attempts = max(1, int(attempts))
    for attempt in range(1, attempts + 1):
        try:
            return await fn()
        except Exception:
            if attempt >= attempts:
                raise
            delay = min(max_delay, base_delay * (2 ** (attempt - 1)))
            if delay > 0:
                await asyncio.sleep(delay)
