"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PHRASE = "Open YouTube"


@dataclass(frozen=True)
class AppConfig:
    recognized_phrase: str = DEFAULT_PHRASE
    device_available: bool = True
    wait_for_enter: bool = True
    debug: bool = False
