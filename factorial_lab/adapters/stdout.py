import sys
from typing import TextIO


class StreamWriter:
    """OutputPort implementation over a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected sys.stdout (e.g. under capture) is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str) -> None:
        self.stream.write(f"{text}\n")

    def flush(self) -> None:
        self.stream.flush()

