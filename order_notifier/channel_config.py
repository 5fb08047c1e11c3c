"""
Channel configuration loader.

Reads which channels to enable, and which built-in handler type backs each
one, from a YAML file such as `config/channels.yml`:

    channels:
      email:
        handler: email
        enabled: true
      mail:
        handler: email   # alias for the email handler
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .base import ChannelConfigError, normalize_channel
from .channels import BUILTIN_CHANNELS
from .factory import NotificationFactory
from .sinks import ConsoleSink, OutputSink

logger = logging.getLogger(__name__)


@dataclass
class ChannelConfig:
    """Configuration for a single channel entry."""

    handler: str
    enabled: bool = True


def _project_root() -> Path:
    """Return the project root path based on this file's location."""
    return Path(__file__).resolve().parent.parent


def default_config_path() -> Path:
    return _project_root() / "config" / "channels.yml"


def load_channels_config(config_path: str | Path | None = None) -> dict[str, ChannelConfig]:
    """
    Load channel configuration from a YAML file.

    Args:
        config_path: Optional override for the config file path. When omitted,
            `config/channels.yml` relative to the project root is read.

    Returns:
        Dictionary mapping canonical channel identifiers to `ChannelConfig`.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ChannelConfigError: If the YAML cannot be parsed or has invalid structure.
    """
    path = Path(config_path) if config_path else default_config_path()
    if not path.exists():
        logger.error("Channels configuration file not found: %s", path)
        raise FileNotFoundError(f"Channels configuration file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            raw_config: Mapping[str, Any] | None = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse channels configuration: %s", exc)
        raise ChannelConfigError(f"Invalid YAML in channels configuration: {exc}") from exc

    if not raw_config:
        logger.warning("Channels configuration file is empty: %s", path)
        return {}
    if not isinstance(raw_config, Mapping):
        raise ChannelConfigError("Channels configuration must be a mapping")

    channels_section = raw_config.get("channels")
    if not isinstance(channels_section, Mapping):
        raise ChannelConfigError("`channels` section is missing or invalid in channels configuration")

    channels: dict[str, ChannelConfig] = {}
    for name, data in channels_section.items():
        if not isinstance(name, str) or not normalize_channel(name):
            raise ChannelConfigError(f"Invalid channel name: {name!r}")
        if not isinstance(data, Mapping):
            raise ChannelConfigError(f"Invalid configuration for channel '{name}'")

        key = normalize_channel(name)
        if key in channels:
            raise ChannelConfigError(f"Channel '{key}' is configured more than once")

        handler = data.get("handler", key)
        if not isinstance(handler, str) or not handler.strip():
            raise ChannelConfigError(f"Channel '{name}' must define a non-empty `handler` string")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ChannelConfigError(
                f"`enabled` for channel '{name}' must be true or false, got: {enabled!r}"
            )

        channels[key] = ChannelConfig(
            handler=normalize_channel(handler),
            enabled=enabled,
        )

    logger.info(
        "Loaded channels configuration: %d channels (%s enabled)",
        len(channels),
        ", ".join(name for name, cfg in channels.items() if cfg.enabled) or "none",
    )
    return channels


def build_factory(
    configs: Mapping[str, ChannelConfig], sink: OutputSink | None = None
) -> NotificationFactory:
    """
    Build a factory holding one handler per enabled channel entry.

    Raises:
        ChannelConfigError: If an entry names an unknown handler type.
    """
    shared_sink = sink if sink is not None else ConsoleSink()
    handlers = {}
    for name, cfg in configs.items():
        if not cfg.enabled:
            logger.debug("Channel %s disabled; skipping", name)
            continue
        handler_cls = BUILTIN_CHANNELS.get(cfg.handler)
        if handler_cls is None:
            raise ChannelConfigError(
                f"Unknown handler '{cfg.handler}' for channel '{name}'. "
                f"Available: {', '.join(sorted(BUILTIN_CHANNELS))}"
            )
        handlers[name] = handler_cls(shared_sink)
    return NotificationFactory(handlers=handlers)


__all__ = ["ChannelConfig", "build_factory", "default_config_path", "load_channels_config"]
