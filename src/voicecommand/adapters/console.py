"""Console output adapter."""

from __future__ import annotations

import sys


class ConsoleOutput:
    def __init__(self, stream=None):
        self._stream = stream

    def write(self, line: str) -> None:
        # Resolve stdout lazily so redirection after construction is honored
        print(line, file=self._stream or sys.stdout, flush=True)


def use_utf8_stdout() -> None:
    """Switch stdout to UTF-8 where the stream allows it."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8")
