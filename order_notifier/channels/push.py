from __future__ import annotations

from ..base import NotificationChannel, NotificationMessage


class PushChannel(NotificationChannel):
    """Push channel. The recipient is a device token."""

    channel = "push"

    def render(self, message: NotificationMessage) -> list[str]:
        return [
            f"🔔 Sending push to device {message.recipient}",
            f"   Title: {message.title}",
            f"   Message: {message.content}",
        ]
