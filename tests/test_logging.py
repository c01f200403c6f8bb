import logging
import unittest

import structlog

from walletdash.logging import setup_logging, run_context


class LoggingSetupTests(unittest.TestCase):
    def setUp(self):
        self._handlers = list(logging.getLogger().handlers)
        self._level = logging.getLogger().level

    def tearDown(self):
        structlog.contextvars.clear_contextvars()
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)
        structlog.reset_defaults()

    def test_service_bound_on_setup(self):
        setup_logging()
        self.assertEqual(structlog.contextvars.get_contextvars(), {"service": "walletdash"})

    def test_custom_service_name(self):
        setup_logging(service="walletdash-backfill")
        self.assertEqual(structlog.contextvars.get_contextvars()["service"], "walletdash-backfill")

    def test_run_context_scoped_to_block(self):
        setup_logging()
        with run_context("run-1", "2026-01-05"):
            ctx = structlog.contextvars.get_contextvars()
            self.assertEqual(ctx["run_id"], "run-1")
            self.assertEqual(ctx["date"], "2026-01-05")
            self.assertEqual(ctx["service"], "walletdash")
        self.assertEqual(structlog.contextvars.get_contextvars(), {"service": "walletdash"})

    def test_httpx_quiet_above_debug(self):
        setup_logging()
        self.assertEqual(logging.getLogger("httpx").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
