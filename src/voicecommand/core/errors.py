"""Errors raised by command sources and the voice system."""

from __future__ import annotations


class VoiceCommandError(Exception):
    """Base class for voicecommand errors."""


class DeviceUnavailable(VoiceCommandError):
    """The input device could not be initialized."""


class RecognitionFailed(VoiceCommandError):
    """No text command could be produced from the input."""


class NoSpeechDetected(RecognitionFailed):
    """Listening finished without hearing any speech."""
