"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import Config, config as env_config
from ..core.config_model import AppConfig


def load_app_config(source: Config | None = None) -> AppConfig:
    source = source or env_config
    return AppConfig(
        recognized_phrase=source.RECOGNIZED_PHRASE,
        device_available=source.DEVICE_AVAILABLE,
        wait_for_enter=source.WAIT_FOR_ENTER,
        debug=source.DEBUG,
    )
