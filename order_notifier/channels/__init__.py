"""Notification channels.

Concrete implementations of the NotificationChannel interface, one module
per delivery medium.

Available channels:
- EmailChannel (email.py)
- SmsChannel (sms.py)
- PushChannel (push.py)
- WhatsAppChannel (whatsapp.py)
- TelegramChannel (telegram.py)
"""

from ..base import NotificationChannel
from .email import EmailChannel
from .push import PushChannel
from .sms import SmsChannel
from .telegram import TelegramChannel
from .whatsapp import WhatsAppChannel

# Built-in handler types keyed by their canonical channel identifier.
BUILTIN_CHANNELS: dict[str, type[NotificationChannel]] = {
    cls.channel: cls
    for cls in (EmailChannel, SmsChannel, PushChannel, WhatsAppChannel, TelegramChannel)
}

__all__ = [
    "BUILTIN_CHANNELS",
    "EmailChannel",
    "PushChannel",
    "SmsChannel",
    "TelegramChannel",
    "WhatsAppChannel",
]
