"""qrterm: print QR codes in the terminal with half-block characters."""

from qrterm.encoder import DataOverflowError
from qrterm.renderer import QUIET_ZONE_WIDTH, Renderer, print_qr, render_text
from qrterm.sink import SinkError, TerminalColor, TerminalSink

__all__ = [
    "DataOverflowError",
    "QUIET_ZONE_WIDTH",
    "Renderer",
    "SinkError",
    "TerminalColor",
    "TerminalSink",
    "print_qr",
    "render_text",
]
