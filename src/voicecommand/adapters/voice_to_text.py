"""Voice-to-text adapter: exposes a VoiceSystem as a CommandSource."""

from __future__ import annotations

import logging
from typing import Callable

from ..core.errors import RecognitionFailed
from ..core.ports import OutputSink
from ..voice_system import VoiceSystem
from .console import ConsoleOutput

logger = logging.getLogger(__name__)


def _identity(text: str) -> str:
    return text


class VoiceToTextAdapter:
    """Makes the voice system look like a plain text command source.

    Args:
        voice_system: The recognizer to drive; owned by the adapter.
        transform: Hook applied to the recognized text before it is returned
            (translation, normalization, ...). Defaults to a pass-through.
        sink: Where the adapter's console line goes.
    """

    def __init__(
        self,
        voice_system: VoiceSystem,
        transform: Callable[[str], str] | None = None,
        sink: OutputSink | None = None,
    ):
        if voice_system is None:
            raise ValueError("VoiceToTextAdapter requires a voice system")
        self._voice_system = voice_system
        self._transform = transform or _identity
        self._sink = sink or ConsoleOutput()

    def get_text_command(self) -> str:
        # The device is re-initialized on every call
        self._voice_system.initialize_device()
        recognized = self._voice_system.listen_and_recognize()

        text = self._transform(recognized)
        if not text or not text.strip():
            raise RecognitionFailed(f"could not convert {recognized!r} to text")

        logger.debug("Converted speech %r to text %r", recognized, text)
        self._sink.write(f"[Adapter] Voice converted to text: '{text}'")
        return text
