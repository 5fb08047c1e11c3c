from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from .sinks import ConsoleSink, OutputSink


class NotifierError(Exception):
    """Base class for errors raised by the notifier package."""


class UnsupportedChannelError(NotifierError, ValueError):
    """Raised when no handler is registered for a channel identifier."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"Channel '{channel}' is not supported.")


class ChannelConfigError(NotifierError, ValueError):
    """Raised when a channel configuration file is invalid."""


def normalize_channel(identifier: str) -> str:
    """
    Return the canonical (stripped, lower-case) form of a channel identifier.

    Non-string identifiers normalize to "", which is never registered.
    """
    if not isinstance(identifier, str):
        return ""
    return identifier.strip().lower()


@dataclass(frozen=True)
class NotificationMessage:
    """
    A single notification ready to be sent.

    `title` is shown by channels that support a subject or template line,
    `content` is the message body.
    """

    recipient: str
    title: str
    content: str


class NotificationChannel(ABC):
    """
    Base class for a notification channel.

    Subclasses only decide how a message is laid out; writing goes through
    the injected sink. Instances hold no per-message state, so the factory
    can hand the same instance out for every lookup.

    Usage:
        class FaxChannel(NotificationChannel):
            channel = "fax"

            def render(self, message):
                return [f"Faxing {message.recipient}", message.content]
    """

    channel: ClassVar[str]

    def __init__(self, sink: OutputSink | None = None) -> None:
        self.sink: OutputSink = sink if sink is not None else ConsoleSink()

    @abstractmethod
    def render(self, message: NotificationMessage) -> list[str]:
        """
        Format the message into output lines.

        Lines are ordered recipient first, then title (when the channel
        shows one), then content.
        """

    def send(self, message: NotificationMessage) -> None:
        """Send the message by writing its rendered lines to the sink."""
        for line in self.render(message):
            self.sink.write(line)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(channel='{self.channel}')"
