from __future__ import annotations

from ..base import NotificationChannel, NotificationMessage


class SmsChannel(NotificationChannel):
    """SMS channel. Text messages carry no subject, so the title is dropped."""

    channel = "sms"

    def render(self, message: NotificationMessage) -> list[str]:
        return [
            f"📱 Sending SMS to {message.recipient}",
            f"   Message: {message.content}",
        ]
