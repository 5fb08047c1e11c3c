"""End-to-end tests for the notifier CLI."""

import importlib
import logging

import pytest

from order_notifier import MemorySink
from order_notifier.main import build_manager, main, parse_args, resolve_log_level, run_demo

DEMO_OUTPUT = """\
=== Notification System ===

📧 Sending email to cliente@email.com
   Subject: Order Confirmed
   Message: Your order 12345 has been confirmed!

📱 Sending SMS to +5511999999999
   Message: Your order 12346 has been confirmed!

🔔 Sending push to device device-token-abc123
   Title: Order Shipped
   Message: Your order has shipped! Tracking code: BR123456789

💬 Sending WhatsApp to +5511888888888
   Template: Payment Reminder
   Message: You have a pending payment of $150.00

✈️ Sending Telegram to +5511888888888
   Template: Payment Reminder
   Message: You have a pending payment of $150.00
"""


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv("NOTIFIER_CHANNELS_CONFIG", raising=False)


@pytest.mark.integration
def test_main_prints_demo_sequence(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == DEMO_OUTPUT


@pytest.mark.integration
def test_main_with_default_config_file(capsys):
    from order_notifier.channel_config import default_config_path

    assert main(["--config", str(default_config_path())]) == 0
    assert capsys.readouterr().out == DEMO_OUTPUT


@pytest.mark.integration
def test_main_missing_config_is_fatal(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yml")]) == 2
    assert capsys.readouterr().out == ""


@pytest.mark.integration
def test_main_unsupported_channel_is_fatal(channels_yaml, capsys):
    """The demo stops at the first channel the config does not provide."""
    path = channels_yaml("channels:\n  email: {}\n")
    assert main(["--config", str(path)]) == 2
    out = capsys.readouterr().out
    assert "Sending email to cliente@email.com" in out
    assert "SMS" not in out


@pytest.mark.unit
def test_parse_args_reads_config_from_env(monkeypatch):
    monkeypatch.setenv("NOTIFIER_CHANNELS_CONFIG", "/tmp/channels.yml")
    args = parse_args([])
    assert args.config == "/tmp/channels.yml"
    assert args.verbose is False


@pytest.mark.unit
def test_run_demo_with_memory_sink(capsys):
    sink = MemorySink()
    run_demo(build_manager(sink=sink))

    assert capsys.readouterr().out == "=== Notification System ===\n\n" + "\n" * 4
    assert len(sink.lines) == 14
    assert sink.lines[0] == "📧 Sending email to cliente@email.com"
    assert sink.lines[-1] == "   Message: You have a pending payment of $150.00"


@pytest.mark.unit
@pytest.mark.parametrize(
    "name,expected",
    [
        (None, (logging.INFO, True)),
        ("", (logging.INFO, True)),
        ("debug", (logging.DEBUG, True)),
        (" Warning ", (logging.WARNING, True)),
        ("bogus", (logging.INFO, False)),
        ("verbose", (logging.INFO, False)),
    ],
)
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


@pytest.mark.integration
def test_unknown_log_level_falls_back_to_info(monkeypatch, caplog, capsys):
    """A bad LOG_LEVEL is reported and the demo still runs."""
    import order_notifier.main as cli

    monkeypatch.setenv("LOG_LEVEL", "bogus")
    with caplog.at_level(logging.WARNING):
        cli = importlib.reload(cli)
    assert "Unknown LOG_LEVEL 'bogus'" in caplog.text

    assert cli.main([]) == 0
    assert capsys.readouterr().out == DEMO_OUTPUT
