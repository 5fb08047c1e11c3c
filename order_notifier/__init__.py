"""
Order notifications package.

Routes e-commerce notifications (order confirmation, shipping update,
payment reminder) to one of several channels selected by a string key.
"""

from .base import (
    ChannelConfigError,
    NotificationChannel,
    NotificationMessage,
    NotifierError,
    UnsupportedChannelError,
)
from .factory import NotificationFactory
from .manager import NotificationManager
from .sinks import ConsoleSink, MemorySink, OutputSink

__all__ = [
    "ChannelConfigError",
    "ConsoleSink",
    "MemorySink",
    "NotificationChannel",
    "NotificationFactory",
    "NotificationManager",
    "NotificationMessage",
    "NotifierError",
    "OutputSink",
    "UnsupportedChannelError",
]
__version__ = "0.1.0"
