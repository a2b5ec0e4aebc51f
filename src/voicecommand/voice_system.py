"""Simulated third-party voice recognition system.

Stands in for a speech recognition SDK with its own vocabulary
(initialize the microphone, then listen and recognize) that does not match
the CommandSource port the bot expects. VoiceToTextAdapter bridges the two.
"""

from __future__ import annotations

import logging

from .adapters.console import ConsoleOutput
from .core.config_model import DEFAULT_PHRASE
from .core.errors import DeviceUnavailable, NoSpeechDetected
from .core.ports import OutputSink

logger = logging.getLogger(__name__)


class VoiceSystem:
    """Voice recognizer: enable the microphone, then recognize one utterance.

    Recognition is simulated: `listen_and_recognize` always "hears" the
    phrase given at construction.

    Attributes:
        phrase: Text returned by every recognition
        device_available: False simulates a missing microphone
    """

    def __init__(
        self,
        phrase: str = DEFAULT_PHRASE,
        device_available: bool = True,
        sink: OutputSink | None = None,
    ):
        self.phrase = phrase
        self.device_available = device_available
        self._sink = sink or ConsoleOutput()

    def initialize_device(self) -> None:
        """Turn the microphone on.

        Raises:
            DeviceUnavailable: if no microphone is present
        """
        if not self.device_available:
            logger.debug("Microphone requested but device is unavailable")
            raise DeviceUnavailable("microphone not found")
        self._sink.write("[VoiceSystem] Microphone enabled.")

    def listen_and_recognize(self) -> str:
        """Block until an utterance is heard and return its text.

        Raises:
            NoSpeechDetected: if nothing intelligible was heard
        """
        self._sink.write("[VoiceSystem] Listening...")
        if not self.phrase or not self.phrase.strip():
            raise NoSpeechDetected("no speech detected")
        return self.phrase
