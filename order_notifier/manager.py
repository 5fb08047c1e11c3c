from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .base import NotificationMessage
from .factory import NotificationFactory

logger = logging.getLogger(__name__)


def format_amount(amount: Decimal | int | float | str, currency_symbol: str = "$") -> str:
    """
    Format a monetary amount with thousands separators and two decimals.

    Example:
        format_amount(1234.5) -> "$1,234.50"

    Raises:
        ValueError: If `amount` is not numeric.
    """
    try:
        # str() first so floats keep their printed value (150.1, not 150.0999...)
        value = Decimal(str(amount))
    except InvalidOperation as err:
        raise ValueError(f"Amount must be numeric, got: {amount!r}") from err
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got: {amount!r}")
    try:
        # Midpoints round away from zero: 0.125 -> 0.13
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation as err:
        raise ValueError(f"Amount is too large to format: {amount!r}") from err
    return f"{currency_symbol}{value:,.2f}"


class NotificationManager:
    """
    Sends the shop's notification use cases over a chosen channel.

    Each use case builds a message from a fixed template and hands it to the
    handler the factory resolves for `channel`. An unsupported channel raises
    `UnsupportedChannelError` before anything is sent.
    """

    def __init__(self, factory: NotificationFactory, currency_symbol: str = "$"):
        self._factory = factory
        self.currency_symbol = currency_symbol

    def send_order_confirmation(self, recipient: str, order_number: str, channel: str) -> None:
        self._dispatch(
            channel,
            NotificationMessage(
                recipient=recipient,
                title="Order Confirmed",
                content=f"Your order {order_number} has been confirmed!",
            ),
        )

    def send_shipping_update(self, recipient: str, tracking_code: str, channel: str) -> None:
        self._dispatch(
            channel,
            NotificationMessage(
                recipient=recipient,
                title="Order Shipped",
                content=f"Your order has shipped! Tracking code: {tracking_code}",
            ),
        )

    def send_payment_reminder(
        self, recipient: str, amount: Decimal | int | float | str, channel: str
    ) -> None:
        # Resolve first so a bad channel fails before the amount is touched.
        handler = self._factory.create(channel)
        formatted = format_amount(amount, self.currency_symbol)
        message = NotificationMessage(
            recipient=recipient,
            title="Payment Reminder",
            content=f"You have a pending payment of {formatted}",
        )
        logger.debug("Sending %r via %s", message.title, channel)
        handler.send(message)

    def _dispatch(self, channel: str, message: NotificationMessage) -> None:
        handler = self._factory.create(channel)
        logger.debug("Sending %r via %s", message.title, channel)
        handler.send(message)
