import json
from pathlib import Path

import structlog

log = structlog.get_logger()

SNAPSHOTS_KEY = "daily-snapshots"
LATEST_KEY = "latest"
ACTIVITY_KEY = "activity-log"

class JsonStore:
    """
    JSON documents on disk, one file per key.
    - read() returns None for a missing or unparseable document
    - write() replaces the whole document (no locking, last writer wins)
    """
    def __init__(self, root_dir: str = "./data"):
        self.root_dir = Path(root_dir)

    def path_for(self, key: str) -> Path:
        return self.root_dir / f"{key}.json"

    def read(self, key: str):
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("state_read_failed", key=key, path=str(path), err=str(e))
            return None

    def write(self, key: str, payload) -> Path:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return path
