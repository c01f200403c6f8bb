import json
import tempfile
import unittest
from pathlib import Path

from walletdash.json_store import JsonStore


class JsonStoreTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "data"
        self.store = JsonStore(str(self.root))

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_document_reads_none(self):
        self.assertIsNone(self.store.read("latest"))

    def test_write_creates_directory_and_round_trips(self):
        path = self.store.write("activity-log", {"entries": [{"emoji": "📊"}]})
        self.assertEqual(path, self.root / "activity-log.json")
        text = path.read_text(encoding="utf-8")
        self.assertTrue(text.endswith("}\n"))
        self.assertIn("📊", text)
        self.assertIn('\n  "entries"', text)
        self.assertEqual(self.store.read("activity-log"), {"entries": [{"emoji": "📊"}]})

    def test_corrupt_document_reads_none(self):
        self.root.mkdir(parents=True)
        (self.root / "daily-snapshots.json").write_text("{not json", encoding="utf-8")
        self.assertIsNone(self.store.read("daily-snapshots"))

    def test_write_overwrites(self):
        self.store.write("latest", {"streak_days": 1})
        self.store.write("latest", {"streak_days": 2})
        data = json.loads((self.root / "latest.json").read_text(encoding="utf-8"))
        self.assertEqual(data, {"streak_days": 2})


if __name__ == "__main__":
    unittest.main()
