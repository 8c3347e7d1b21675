"""
Tests for the MarketBridge demo.

This is the end-to-end scenario: two email observers, one SMS observer,
one notification from each factory.
"""

import io
import subprocess
import sys
from pathlib import Path

from notifications.demo import run_marketbridge_demo
from notifications.models import NotificationKind

EXPECTED_OUTPUT = (
    "New Email: Bye from MarketBridge!\n"
    "New Email: Bye from MarketBridge!\n"
    "New SMS: Hello from MarketBridge!\n"
)


class TestMarketBridgeDemo:
    """Tests for run_marketbridge_demo."""

    def test_console_output(self, capsys):
        """Test the exact three lines on stdout."""
        run_marketbridge_demo()

        assert capsys.readouterr().out == EXPECTED_OUTPUT

    def test_custom_stream(self):
        """Test redirecting the observers to a stream."""
        stream = io.StringIO()

        run_marketbridge_demo(stream=stream)

        assert stream.getvalue() == EXPECTED_OUTPUT

    def test_returned_notifications(self):
        """Test the notifications handed back by the demo."""
        email, sms = run_marketbridge_demo(stream=io.StringIO())

        assert email.kind == NotificationKind.EMAIL
        assert email.content == "Bye from MarketBridge!"
        assert email.platform is None
        assert sms.kind == NotificationKind.SMS
        assert sms.content == "Hello from MarketBridge!"
        assert sms.platform is None

    def test_run_as_module(self):
        """Test `python -m notifications.demo` prints the three lines."""
        project_root = Path(__file__).parent.parent.parent

        result = subprocess.run(
            [sys.executable, "-m", "notifications.demo"],
            cwd=project_root,
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert result.returncode == 0
        assert result.stdout == EXPECTED_OUTPUT
