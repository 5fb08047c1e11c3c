from __future__ import annotations

from ..base import NotificationChannel, NotificationMessage


class EmailChannel(NotificationChannel):
    """Email channel: address, subject and body."""

    channel = "email"

    def render(self, message: NotificationMessage) -> list[str]:
        return [
            f"📧 Sending email to {message.recipient}",
            f"   Subject: {message.title}",
            f"   Message: {message.content}",
        ]
