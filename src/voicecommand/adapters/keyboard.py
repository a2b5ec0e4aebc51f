"""Keyboard command source: the bot's native, non-voice input."""

from __future__ import annotations

from typing import Callable

from ..core.errors import RecognitionFailed


class KeyboardCommandSource:
    def __init__(self, input_fn: Callable[[str], str] | None = None, prompt: str = "> "):
        self._input_fn = input_fn
        self._prompt = prompt

    def get_text_command(self) -> str:
        try:
            text = (self._input_fn or input)(self._prompt)
        except EOFError as e:
            raise RecognitionFailed("no input received") from e

        text = text.strip()
        if not text:
            raise RecognitionFailed("empty command")
        return text
