"""Terminal sink: writes styled glyphs as ANSI escape sequences to a text stream."""

import sys
from enum import Enum
from typing import TextIO


class SinkError(RuntimeError):
    """Writing to the terminal failed. The render is unusable."""


class TerminalColor(Enum):
    """Indexed terminal colors, valued by their ANSI palette index."""
    BLACK = 0
    WHITE = 7

    @property
    def fg(self) -> str:
        return f"\033[3{self.value}m"

    @property
    def bg(self) -> str:
        return f"\033[4{self.value}m"


RESET = "\033[0m"
NEWLINE = "\n"


class TerminalSink:
    """Accepts styled glyphs and line breaks for one render.

    Every glyph carries its own foreground/background and is followed by a
    reset, so no style leaks into the next emission. Newlines are written
    unstyled so trailing space takes the terminal's default colors.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str):
        try:
            self.stream.write(text)
        except (OSError, ValueError) as exc:  # ValueError: closed stream
            raise SinkError(f"failed to write QR code to terminal: {exc}") from exc

    def emit_styled(self, glyph: str, fg: TerminalColor, bg: TerminalColor):
        self._write(f"{fg.fg}{bg.bg}{glyph}{RESET}")

    def emit_newline(self):
        self._write(NEWLINE)

    def flush(self):
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise SinkError(f"failed to flush terminal: {exc}") from exc
