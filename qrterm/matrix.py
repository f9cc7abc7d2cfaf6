"""Bitmatrix helpers: module colors, square side lookup and quiet-zone padding.

A bitmatrix is a flat, row-major sequence of length ``n * n``; the cell at
row ``r``, column ``c`` lives at index ``r * n + c``. ``n == 0`` is allowed.
"""

import math
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TypeVar

import numpy as np

T = TypeVar("T")


class ModuleColor(Enum):
    DARK = "dark"
    LIGHT = "light"


def square_side(length: int) -> int:
    """Return ``s`` such that ``s * s == length``.

    Raises:
        ValueError: if ``length`` is negative or not a perfect square. A
            non-square bitmatrix is a caller bug, not a recoverable state.
    """
    if length < 0:
        raise ValueError(f"matrix length {length} is negative")
    side = math.isqrt(length)
    if side * side != length:
        raise ValueError(f"matrix length {length} is not a perfect square")
    return side


def surround_quiet(cells: Sequence[T], thickness: int, quiet: T) -> list[T]:
    """Surround a square bitmatrix with a ``thickness`` wide border of ``quiet``.

    The result has side ``w + 2 * thickness`` and holds the original matrix
    centered and unchanged. An empty input yields a ``2t x 2t`` block of
    ``quiet``; ``thickness == 0`` returns a copy of the input.

    Cells are opaque: tuples and other sequences stay single values.
    """
    if thickness < 0:
        raise ValueError(f"quiet zone thickness must be >= 0, got {thickness}")

    width = square_side(len(cells))
    out_width = width + thickness * 2

    out = np.empty((out_width, out_width), dtype=object)
    out.fill(quiet)
    if width:
        inner = np.fromiter(cells, dtype=object, count=len(cells)).reshape(width, width)
        out[thickness:thickness + width, thickness:thickness + width] = inner
    return out.ravel().tolist()


def flatten_modules(rows: Iterable[Iterable[bool]]) -> list[ModuleColor]:
    """Convert an encoder's nested bool matrix (True = dark) to a flat bitmatrix."""
    return [ModuleColor.DARK if module else ModuleColor.LIGHT for row in rows for module in row]
