"""Text-only chat bot, the client side of the adapter demo."""

from __future__ import annotations

import logging

from .errors import DeviceUnavailable, RecognitionFailed
from .ports import CommandSource, OutputSink

logger = logging.getLogger(__name__)


class SmartBot:
    """Executes plain text commands.

    The bot does not know where a command comes from; it only sees a
    CommandSource, so a voice adapter and a keyboard are interchangeable.
    """

    def __init__(self, sink: OutputSink):
        self._sink = sink

    def process_command(self, source: CommandSource) -> str | None:
        """Request one command from `source` and execute it.

        Returns:
            The executed (uppercased) command, or None when the source could
            not produce one. Failures are reported to the user, not raised.
        """
        self._sink.write("\n--- Bot is waiting for a command ---")

        try:
            command = source.get_text_command()
        except RecognitionFailed as e:
            logger.warning("Command not understood: %s", e)
            self._sink.write(f"BOT: Command not understood ({e})")
            return None
        except DeviceUnavailable as e:
            logger.warning("Input device unavailable: %s", e)
            self._sink.write(f"BOT: Voice input unavailable ({e})")
            return None

        logger.debug("Received command %r from %s", command, type(source).__name__)
        executed = command.upper()
        self._sink.write(f"BOT: Executing command: >> {executed} <<")
        return executed
