"""
Channel registry.

Maps case-insensitive channel identifiers to handler instances. Routing is
driven by the mapping alone: supporting a new channel means registering a
handler, not adding branches at call sites.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .base import NotificationChannel, UnsupportedChannelError, normalize_channel
from .channels import BUILTIN_CHANNELS
from .sinks import ConsoleSink, OutputSink

logger = logging.getLogger(__name__)


class NotificationFactory:
    """
    Resolves a channel identifier to its notification handler.

    Built-in handlers are created eagerly and share one sink. Pass `handlers`
    to start from an explicit mapping instead of the built-ins.

    Example:
        factory = NotificationFactory(sink=MemorySink())
        factory.create("EMAIL").send(message)
    """

    def __init__(
        self,
        sink: OutputSink | None = None,
        handlers: Mapping[str, NotificationChannel] | None = None,
    ) -> None:
        self._handlers: dict[str, NotificationChannel] = {}
        if handlers is None:
            shared_sink = sink if sink is not None else ConsoleSink()
            handlers = {name: cls(shared_sink) for name, cls in BUILTIN_CHANNELS.items()}
        for identifier, handler in handlers.items():
            self.register(identifier, handler)

    @property
    def channels(self) -> tuple[str, ...]:
        """Registered channel identifiers, sorted."""
        return tuple(sorted(self._handlers))

    def supports(self, identifier: str) -> bool:
        return normalize_channel(identifier) in self._handlers

    def register(self, identifier: str, handler: NotificationChannel) -> None:
        """
        Register a handler under a channel identifier.

        Args:
            identifier: Channel key; stored in its canonical lower-case form.
            handler: The channel implementation to return for this key.

        Raises:
            ValueError: If the identifier is empty, the handler is missing, or
                the identifier is already registered.
        """
        key = normalize_channel(identifier)
        if not key:
            raise ValueError("Channel identifier must be a non-empty string")
        if handler is None:
            raise ValueError(f"Handler for channel '{identifier}' must not be None")
        if key in self._handlers:
            raise ValueError(f"Channel '{key}' is already registered")

        self._handlers[key] = handler
        logger.debug("Registered channel %s -> %r", key, handler)

    def create(self, identifier: str) -> NotificationChannel:
        """
        Return the handler registered for `identifier`.

        Raises:
            UnsupportedChannelError: If no handler is registered; the error
                message names the identifier exactly as given.
        """
        handler = self._handlers.get(normalize_channel(identifier))
        if handler is None:
            logger.error("Unsupported notification channel: %s", identifier)
            raise UnsupportedChannelError(identifier)
        return handler

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(channels={list(self.channels)})"


__all__ = ["NotificationFactory"]
