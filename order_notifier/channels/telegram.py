from __future__ import annotations

from ..base import NotificationChannel, NotificationMessage


class TelegramChannel(NotificationChannel):
    """Telegram channel, laid out like WhatsApp with a template line."""

    channel = "telegram"

    def render(self, message: NotificationMessage) -> list[str]:
        return [
            f"✈️ Sending Telegram to {message.recipient}",
            f"   Template: {message.title}",
            f"   Message: {message.content}",
        ]
