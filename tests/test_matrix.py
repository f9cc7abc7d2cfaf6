from __future__ import annotations

import pytest

from qrterm.matrix import ModuleColor, flatten_modules, square_side, surround_quiet


def _square(width: int) -> list[int]:
    return list(range(width * width))


def test_surround_quiet_normal() -> None:
    expected = [
        9, 9, 9, 9, 9, 9, 9, 9, 9,
        9, 9, 9, 9, 9, 9, 9, 9, 9,
        9, 9, 9, 9, 9, 9, 9, 9, 9,
        9, 9, 9, 0, 1, 2, 9, 9, 9,
        9, 9, 9, 3, 4, 5, 9, 9, 9,
        9, 9, 9, 6, 7, 8, 9, 9, 9,
        9, 9, 9, 9, 9, 9, 9, 9, 9,
        9, 9, 9, 9, 9, 9, 9, 9, 9,
        9, 9, 9, 9, 9, 9, 9, 9, 9,
    ]
    assert surround_quiet([0, 1, 2, 3, 4, 5, 6, 7, 8], 3, 9) == expected


def test_surround_quiet_empty() -> None:
    assert surround_quiet([], 3, 7) == [7] * 36


@pytest.mark.parametrize("width", [0, 1, 2, 5])
def test_surround_quiet_zero_thickness_is_identity(width: int) -> None:
    cells = _square(width)
    assert surround_quiet(cells, 0, -1) == cells


@pytest.mark.parametrize("width", [0, 1, 4, 7])
@pytest.mark.parametrize("thickness", [0, 1, 2, 5])
def test_surround_quiet_size_border_and_interior(width: int, thickness: int) -> None:
    cells = _square(width)
    out = surround_quiet(cells, thickness, -1)
    out_width = width + 2 * thickness
    assert len(out) == out_width ** 2

    for r in range(out_width):
        for c in range(out_width):
            value = out[r * out_width + c]
            inside = thickness <= r < thickness + width and thickness <= c < thickness + width
            if inside:
                assert value == cells[(r - thickness) * width + (c - thickness)]
            else:
                assert value == -1


def test_surround_quiet_keeps_module_colors() -> None:
    cells = [ModuleColor.DARK, ModuleColor.LIGHT, ModuleColor.LIGHT, ModuleColor.DARK]
    out = surround_quiet(cells, 1, ModuleColor.LIGHT)
    assert len(out) == 16
    assert out[5] is ModuleColor.DARK
    assert out[10] is ModuleColor.DARK
    assert out.count(ModuleColor.DARK) == 2


def test_surround_quiet_rejects_non_square() -> None:
    with pytest.raises(ValueError, match="not a perfect square"):
        surround_quiet([1, 2, 3], 2, 0)


def test_surround_quiet_rejects_negative_thickness() -> None:
    with pytest.raises(ValueError):
        surround_quiet([1], -1, 0)


@pytest.mark.parametrize("side", [0, 1, 2, 3, 21, 177, 10_000])
def test_square_side_exact(side: int) -> None:
    assert square_side(side * side) == side


@pytest.mark.parametrize("length", [2, 3, 5, 6, 8, 24, 99, 10_001, 10 ** 12 + 1])
def test_square_side_rejects_non_squares(length: int) -> None:
    with pytest.raises(ValueError, match=f"matrix length {length} is not a perfect square"):
        square_side(length)


def test_square_side_every_small_length() -> None:
    squares = {s * s for s in range(12)}
    for length in range(121):
        if length in squares:
            assert square_side(length) ** 2 == length
        else:
            with pytest.raises(ValueError):
                square_side(length)


def test_flatten_modules() -> None:
    rows = [[True, False], [False, True]]
    assert flatten_modules(rows) == [
        ModuleColor.DARK, ModuleColor.LIGHT,
        ModuleColor.LIGHT, ModuleColor.DARK,
    ]


def test_surround_quiet_tuple_cells() -> None:
    cells = [(0, 0), (1, 1), (2, 2), (3, 3)]
    out = surround_quiet(cells, 1, (9, 9))
    assert len(out) == 16
    assert out[5:7] == [(0, 0), (1, 1)]
    assert out[9:11] == [(2, 2), (3, 3)]
    assert out.count((9, 9)) == 12


def test_surround_quiet_tuple_quiet_on_empty() -> None:
    assert surround_quiet([], 1, (7, 7)) == [(7, 7)] * 4


def test_surround_quiet_string_cells() -> None:
    assert surround_quiet(["ab"], 1, "..") == [
        "..", "..", "..",
        "..", "ab", "..",
        "..", "..", "..",
    ]
