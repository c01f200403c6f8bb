import unittest

from walletdash.pipeline.activity import (
    activity_document,
    load_entries,
    record_daily_entry,
)
from walletdash.providers.common import Balance

BALANCES = {
    "solana_devnet": Balance(0.25, "SOL", 4),
    "base_sepolia": "0.100000 ETH",
    "eth_sepolia": Balance(0.05, "ETH", 6),
}


class RecordDailyEntryTests(unittest.TestCase):
    def test_appends_entry(self):
        entries, added = record_daily_entry([], "2026-01-05", BALANCES)
        self.assertTrue(added)
        self.assertEqual(len(entries), 1)
        entry = entries[0]
        self.assertEqual(entry["date"], "2026-01-05")
        self.assertEqual(entry["type"], "daily-snapshot")
        self.assertEqual(entry["emoji"], "ð")
        self.assertEqual(
            entry["message"],
            "Daily snapshot recorded — SOL: 0.2500 SOL | Base: 0.100000 ETH | ETH: 0.050000 ETH 📊",
        )
        self.assertIn("SOL: 0.2500 SOL", entry["message"])
        self.assertIn("Base: 0.100000 ETH", entry["message"])
        self.assertIn("ETH: 0.050000 ETH", entry["message"])

    def test_second_call_same_day_is_noop(self):
        entries, _ = record_daily_entry([], "2026-01-05", BALANCES)
        again, added = record_daily_entry(entries, "2026-01-05", {"solana_devnet": "9.0000 SOL"})
        self.assertFalse(added)
        self.assertEqual(again, entries)
        daily = [e for e in again if e["date"] == "2026-01-05" and e["type"] == "daily-snapshot"]
        self.assertEqual(len(daily), 1)

    def test_other_entry_types_do_not_block(self):
        existing = [{"date": "2026-01-05", "type": "milestone", "message": "shipped"}]
        entries, added = record_daily_entry(existing, "2026-01-05", BALANCES)
        self.assertTrue(added)
        self.assertEqual(len(entries), 2)

    def test_retention_drops_oldest(self):
        existing = [
            {"date": "2025-12-01", "type": "note", "message": str(i)}
            for i in range(1, 61)
        ]
        entries, added = record_daily_entry(existing, "2026-01-05", BALANCES)
        self.assertTrue(added)
        self.assertEqual(len(entries), 60)
        self.assertEqual(entries[0]["message"], "2")
        self.assertEqual(entries[-1]["date"], "2026-01-05")
        self.assertEqual(len(existing), 60)


    def test_non_positive_retention_rejected(self):
        with self.assertRaises(ValueError):
            record_daily_entry([], "2026-01-05", BALANCES, retention=0)


class LoadEntriesTests(unittest.TestCase):
    def test_missing_or_malformed_is_empty(self):
        self.assertEqual(load_entries(None), [])
        self.assertEqual(load_entries("x"), [])
        self.assertEqual(load_entries({"entries": {"a": 1}}), [])

    def test_drops_non_object_entries(self):
        doc = {"entries": [{"date": "2026-01-04", "type": "daily-snapshot"}, 3, None]}
        self.assertEqual(load_entries(doc), [{"date": "2026-01-04", "type": "daily-snapshot"}])

    def test_document_keeps_extra_keys(self):
        out = activity_document({"entries": [], "title": "log"}, [{"date": "2026-01-05"}])
        self.assertEqual(out, {"entries": [{"date": "2026-01-05"}], "title": "log"})


if __name__ == "__main__":
    unittest.main()
