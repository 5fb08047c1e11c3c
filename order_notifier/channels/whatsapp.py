from __future__ import annotations

from ..base import NotificationChannel, NotificationMessage


class WhatsAppChannel(NotificationChannel):
    """
    WhatsApp channel.

    Business messages are sent from pre-approved templates; the message
    title names the template.
    """

    channel = "whatsapp"

    def render(self, message: NotificationMessage) -> list[str]:
        return [
            f"💬 Sending WhatsApp to {message.recipient}",
            f"   Template: {message.title}",
            f"   Message: {message.content}",
        ]
