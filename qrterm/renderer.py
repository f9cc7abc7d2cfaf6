"""Render QR codes in the terminal, two module rows per text line.

Each character cell shows two vertically stacked modules. The obvious glyph
set would be "█", "▀", "▄" and " ", but many terminal fonts draw "█" and "▀"
with a gap above them, which leaves seams between lines. "▄" is drawn flush,
so only "▄" and " " are used and the other two states come from swapping
foreground and background ("█" is an inverted " ", "▀" an inverted "▄").
"""

import io
from collections.abc import Sequence
from typing import TextIO

from qrterm.encoder import DEFAULT_ECC, get_module_matrix
from qrterm.logging import audit, get_logger, trace
from qrterm.matrix import ModuleColor, square_side, surround_quiet
from qrterm.sink import TerminalColor, TerminalSink

log = get_logger("renderer")

# Quiet zone around the code, in modules. The QR standard asks for 4; 2 keeps
# codes scannable while fitting on narrow terminals.
QUIET_ZONE_WIDTH = 2

LOWER_HALF = "▄"
BLANK = " "

_DARK = ModuleColor.DARK
_LIGHT = ModuleColor.LIGHT
_BLACK = TerminalColor.BLACK
_WHITE = TerminalColor.WHITE

# (top, bottom) -> (glyph, fg, bg)
CELL_STYLES = {
    (_DARK, _DARK): (BLANK, _WHITE, _BLACK),
    (_DARK, _LIGHT): (LOWER_HALF, _WHITE, _BLACK),
    (_LIGHT, _DARK): (LOWER_HALF, _BLACK, _WHITE),
    (_LIGHT, _LIGHT): (BLANK, _BLACK, _WHITE),
}


class Renderer:
    """Rasterizes padded bitmatrices onto a sink."""

    def __init__(self, sink: TerminalSink | None = None):
        self.sink = sink if sink is not None else TerminalSink()

    def print_matrix(self, cells: Sequence[ModuleColor]):
        """Emit a square bitmatrix row pair by row pair.

        A matrix of side ``W`` produces ``W * ceil(W / 2)`` glyphs and
        ``ceil(W / 2)`` newlines, strictly left-to-right, top-to-bottom.

        Raises:
            ValueError: ``cells`` is not square.
        """
        width = square_side(len(cells))

        for row in range(width // 2):
            top = row * 2 * width
            below = top + width
            for col in range(width):
                self.sink.emit_styled(*CELL_STYLES[cells[top + col], cells[below + col]])
            self.sink.emit_newline()

        # Odd height: the last module row gets an all-light row beneath it
        if width % 2 == 1:
            last = width * (width - 1)
            for col in range(width):
                self.sink.emit_styled(*CELL_STYLES[cells[last + col], _LIGHT])
            self.sink.emit_newline()

    def print_qr(
        self,
        text: str,
        ecc: str = DEFAULT_ECC,
        border: int = QUIET_ZONE_WIDTH,
        version: int | None = None,
        mask: int | None = None,
    ):
        """Encode ``text``, add the quiet zone and print the result.

        Nothing is written if encoding fails.
        """
        modules = get_module_matrix(text, ecc=ecc, version=version, mask=mask)
        pixels = surround_quiet(modules, border, _LIGHT)
        self.print_matrix(pixels)
        self.sink.flush()

        side = square_side(len(pixels))
        audit("qr.rendered", logger=log,
              modules=square_side(len(modules)), border=border,
              columns=side, lines=(side + 1) // 2)


@trace
def print_qr(
    text: str,
    ecc: str = DEFAULT_ECC,
    border: int = QUIET_ZONE_WIDTH,
    version: int | None = None,
    mask: int | None = None,
    stream: TextIO | None = None,
):
    """Print ``text`` as a QR code in the terminal.

    Args:
        text: Text to encode.
        ecc: Error correction level: L/M/Q/H.
        border: Quiet zone width in modules (default 2, see QUIET_ZONE_WIDTH).
        version: QR version 1-40 (None = smallest that fits).
        mask: Mask pattern 0-7 (None = auto-select best).
        stream: Text stream to write to (default: sys.stdout).

    Raises:
        DataOverflowError: ``text`` is too long to encode.
        ValueError: invalid encoder options or a negative ``border``.
        SinkError: writing to ``stream`` failed.
    """
    Renderer(TerminalSink(stream)).print_qr(text, ecc=ecc, border=border, version=version, mask=mask)


def render_text(text: str, **options) -> str:
    """Return exactly what ``print_qr`` would write, escape sequences included."""
    buffer = io.StringIO()
    print_qr(text, stream=buffer, **options)
    return buffer.getvalue()
