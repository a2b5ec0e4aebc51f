#!/usr/bin/env python3
"""voicecommand: a text-only bot takes a voice command through an adapter"""

from __future__ import annotations

import logging
from typing import Callable

from .adapters.config_env import load_app_config
from .adapters.console import ConsoleOutput, use_utf8_stdout
from .adapters.voice_to_text import VoiceToTextAdapter
from .core.bot import SmartBot
from .core.config_model import AppConfig
from .core.ports import OutputSink
from .voice_system import VoiceSystem

logger = logging.getLogger(__name__)


def run_demo(app_config: AppConfig, sink: OutputSink) -> str | None:
    """Wire the voice system into the bot through the adapter and run once."""
    # The "foreign" voice system the bot cannot talk to directly
    voice_system = VoiceSystem(
        phrase=app_config.recognized_phrase,
        device_available=app_config.device_available,
        sink=sink,
    )

    # Wrapped, it looks like any other text command source
    adapter = VoiceToTextAdapter(voice_system, sink=sink)

    bot = SmartBot(sink)
    return bot.process_command(adapter)


def wait_for_enter(input_fn: Callable[[], str] | None = None) -> None:
    """Read and discard one line so the console stays open."""
    try:
        (input_fn or input)()
    except EOFError:
        logger.debug("stdin closed, exiting without waiting")


def main():
    app_config = load_app_config()
    logging.basicConfig(
        level=logging.DEBUG if app_config.debug else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    use_utf8_stdout()

    run_demo(app_config, ConsoleOutput())

    if app_config.wait_for_enter:
        wait_for_enter()


if __name__ == "__main__":
    main()
