"""
Order Notifier - Main Entry Point

Runs the notification demo: one order confirmation by email, one by SMS, a
shipping update by push, and payment reminders by WhatsApp and Telegram.

Usage:
    python -m order_notifier.main [--config PATH] [--verbose]

Options:
    --config PATH   YAML file selecting the channels to register
                    (default: $NOTIFIER_CHANNELS_CONFIG, else built-in channels)
    --verbose       Enable debug logging

Exit Codes:
    0: Success
    2: Fatal error (unsupported channel, invalid configuration, etc.)
"""

import argparse
import logging
import os
import sys
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv

from .channel_config import build_factory, load_channels_config
from .factory import NotificationFactory
from .manager import NotificationManager
from .sinks import OutputSink

load_dotenv()


def resolve_log_level(name: Optional[str]) -> tuple[int, bool]:
    """
    Map a LOG_LEVEL name to a logging level.

    Returns:
        (level, recognized): unset names give INFO; unknown names give
        (logging.INFO, False).
    """
    if not name:
        return logging.INFO, True
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level, True
    return logging.INFO, False


_log_level, _log_level_known = resolve_log_level(os.getenv("LOG_LEVEL"))

# Logs go to stderr so channel output on stdout stays readable.
logging.basicConfig(
    level=_log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

if not _log_level_known:
    logger.warning('Unknown LOG_LEVEL %r; using INFO', os.getenv('LOG_LEVEL'))


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='Send the demo order notifications through each channel'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=os.getenv('NOTIFIER_CHANNELS_CONFIG'),
        help='Path to a channels.yml file (default: built-in channels)'
    )
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def build_manager(config_path: Optional[str] = None, sink: Optional[OutputSink] = None) -> NotificationManager:
    """
    Wire a factory into a NotificationManager.

    Without `config_path` the factory holds the five built-in channels;
    otherwise it holds the enabled entries of the given YAML file.
    """
    if config_path:
        factory = build_factory(load_channels_config(config_path), sink=sink)
    else:
        factory = NotificationFactory(sink=sink)
    logger.debug('Channels available: %s', ', '.join(factory.channels))
    return NotificationManager(factory)


def run_demo(manager: NotificationManager, out=None) -> None:
    """Issue the fixed demonstration sequence, separated by blank lines."""
    out = out or sys.stdout

    print('=== Notification System ===\n', file=out)

    manager.send_order_confirmation('cliente@email.com', '12345', 'email')
    print(file=out)

    manager.send_order_confirmation('+5511999999999', '12346', 'sms')
    print(file=out)

    manager.send_shipping_update('device-token-abc123', 'BR123456789', 'push')
    print(file=out)

    manager.send_payment_reminder('+5511888888888', Decimal('150.00'), 'whatsapp')
    print(file=out)

    manager.send_payment_reminder('+5511888888888', Decimal('150.00'), 'telegram')


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the notifier demo.

    Returns:
        int: Exit code (0 for success, 2 for failure).
    """
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        manager = build_manager(args.config)
        run_demo(manager)
        logger.info('Demo notifications sent')
        return 0
    except Exception as e:
        logger.error(f'Failed to send notifications: {e}', exc_info=True)
        return 2


if __name__ == '__main__':
    sys.exit(main())
