"""Test Sentry setup and filtering of user errors."""

import unittest
from unittest.mock import patch

import click

from simplestream.cli.main import initialize_sentry
from simplestream.exceptions import ConfigurationError, FetchError, MissingFieldError


class TestInitializeSentry(unittest.TestCase):
    @patch("sentry_sdk.init")
    def test_disabled_without_dsn(self, mock_init):
        with patch.dict("os.environ", {"TELEMETRY": "true"}, clear=True):
            self.assertFalse(initialize_sentry())
        mock_init.assert_not_called()

    @patch("sentry_sdk.init")
    def test_disabled_by_telemetry_flag(self, mock_init):
        with patch.dict("os.environ", {"SENTRY_DSN": "https://key@sentry.example.com/1", "TELEMETRY": "false"}):
            self.assertFalse(initialize_sentry())
        mock_init.assert_not_called()


class TestSentryFiltering(unittest.TestCase):
    def setUp(self):
        env = patch.dict("os.environ", {"SENTRY_DSN": "https://key@sentry.example.com/1", "TELEMETRY": "true"})
        env.start()
        self.addCleanup(env.stop)
        init = patch("sentry_sdk.init")
        self.mock_init = init.start()
        self.addCleanup(init.stop)
        self.assertTrue(initialize_sentry())
        self.before_send = self.mock_init.call_args.kwargs["before_send"]

    def _send(self, exc):
        event = {"exception": {"values": [{"type": type(exc).__name__}]}}
        return self.before_send(event, {"exc_info": (type(exc), exc, None)})

    def test_dsn_passed(self):
        self.assertEqual(self.mock_init.call_args.kwargs["dsn"], "https://key@sentry.example.com/1")

    def test_filters_configuration_errors(self):
        self.assertIsNone(self._send(ConfigurationError("bad host")))

    def test_filters_usage_errors(self):
        self.assertIsNone(self._send(click.UsageError("unrecognized argument: noble")))

    def test_allows_catalog_errors(self):
        self.assertIsNotNone(self._send(MissingFieldError("products")))

    def test_allows_fetch_errors(self):
        self.assertIsNotNone(self._send(FetchError("Failed to connect")))

    def test_event_without_exception(self):
        event = {"message": "hello"}
        self.assertIs(self.before_send(event, {}), event)


if __name__ == "__main__":
    unittest.main()
