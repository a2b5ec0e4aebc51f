"""Core ports (interfaces) for voicecommand.

The bot only ever talks to these protocols, so any text source (voice via
an adapter, keyboard, a test stub) and any output sink can be plugged in
without touching the core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandSource(Protocol):
    """Something that produces plain text commands."""

    def get_text_command(self) -> str:
        """Return the next text command.

        Raises:
            RecognitionFailed: if no command could be produced.
            DeviceUnavailable: if the underlying input device is missing.
        """


@runtime_checkable
class OutputSink(Protocol):
    """User-visible console lines."""

    def write(self, line: str) -> None:
        """Emit one line of output."""
