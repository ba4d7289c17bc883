"""Text patterns of numbers, letters and stars, each built for a given row count.

Every function returns the pattern as one string, each line ending in a newline,
with the same spacing the console output uses (a value followed by one space,
blanks of two spaces where a cell is left empty).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = [f"pattern_{n}" for n in range(1, 28)] + ["PATTERNS", "render"]

_BLANK = "  "
_STAR = "* "


def _cells(values: Iterable[object], sep: str = " ") -> str:
    return "".join(f"{value}{sep}" for value in values)


def _text(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _letter(base: str, offset: int) -> str:
    return chr(ord(base) + offset)


def pattern_1(rows: int) -> str:
    """Square where every cell of row i holds i."""
    return _text(_cells([i] * rows) for i in range(1, rows + 1))


def pattern_2(rows: int) -> str:
    """Square where each row counts 1 up to rows."""
    return _text(_cells(range(1, rows + 1)) for _ in range(rows))


def pattern_3(rows: int) -> str:
    """Square where each row counts rows down to 1, under a heading."""
    body = _text(_cells(range(rows, 0, -1)) for _ in range(rows))
    return "Descending Number Pattern\n" + body


def pattern_4(rows: int) -> str:
    """Two squares: column squares, then column cubes, each under a heading."""
    squares = _text(_cells(j * j for j in range(1, rows + 1)) for _ in range(rows))
    cubes = _text(_cells(j**3 for j in range(1, rows + 1)) for _ in range(rows))
    return (
        "Ascending Square Pattern\n"
        + squares
        + "\n\n"
        + "Ascending Cube Pattern\n"
        + cubes
    )


def pattern_5(rows: int) -> str:
    """Square where row i repeats the i-th lower-case letter."""
    return _text(_cells([_letter("a", i)] * rows) for i in range(rows))


def pattern_6(rows: int) -> str:
    """Square where each row runs through the lower-case letters from 'a'."""
    return _text(_cells(_letter("a", j) for j in range(rows)) for _ in range(rows))


def pattern_7(rows: int) -> str:
    """Square numbered 1 to rows*rows, row by row, cells two spaces apart."""
    return _text(
        _cells(((i - 1) * rows + j for j in range(1, rows + 1)), sep="  ")
        for i in range(1, rows + 1)
    )


def pattern_8(rows: int) -> str:
    """Left-aligned triangle of stars growing by one per row."""
    return _text(_STAR * (i + 1) for i in range(rows))


def pattern_9(rows: int) -> str:
    """Left-aligned triangle where row i counts 1 up to i."""
    return _text(_cells(range(1, i + 1)) for i in range(1, rows + 1))


def pattern_10(rows: int) -> str:
    """Left-aligned triangle where row i repeats i, i times."""
    return _text(_cells([i] * i) for i in range(1, rows + 1))


def pattern_11(rows: int) -> str:
    """Left-aligned triangle where row i counts i down to 1."""
    return _text(_cells(range(i, 0, -1)) for i in range(1, rows + 1))


def pattern_12(rows: int) -> str:
    """Left-aligned triangle where row i repeats the i-th lower-case letter."""
    return _text(_cells([_letter("a", i)] * (i + 1)) for i in range(rows))


def pattern_13(rows: int) -> str:
    """Inverted left-aligned triangle of stars."""
    return _text(_STAR * (rows - i) for i in range(rows))


def pattern_14(rows: int) -> str:
    """Inverted triangle where each row counts 1 up to its length."""
    return _text(_cells(range(1, i + 1)) for i in range(rows, 0, -1))


def pattern_15(rows: int) -> str:
    """Triangle counting down from rows; it opens with an empty line."""
    return _text(_cells(range(rows, i, -1)) for i in range(rows, -1, -1))


def pattern_16(rows: int) -> str:
    """Right-aligned triangle of stars."""
    return _text(_BLANK * (rows - i - 1) + _STAR * (i + 1) for i in range(rows))


def pattern_17(rows: int) -> str:
    """Right-aligned triangle where row i repeats i."""
    return _text(
        _BLANK * (rows - i) + _cells([i] * i) for i in range(1, rows + 1)
    )


def pattern_18(rows: int) -> str:
    """Right-aligned triangle where row i counts 1 up to i."""
    return _text(
        _BLANK * (rows - i) + _cells(range(1, i + 1)) for i in range(1, rows + 1)
    )


def pattern_19(rows: int) -> str:
    """Right-aligned triangle of upper-case letters from 'A'."""
    return _text(
        _BLANK * (rows - i) + _cells(_letter("A", k) for k in range(i))
        for i in range(1, rows + 1)
    )


def pattern_20(rows: int) -> str:
    """Right-aligned triangle where row i counts i down to 1."""
    return _text(
        _BLANK * (rows - i) + _cells(range(i, 0, -1)) for i in range(1, rows + 1)
    )


def pattern_21(rows: int) -> str:
    """Star pyramid padded with blanks on both sides to full width."""
    return _text(
        _BLANK * (rows - i - 1) + _STAR * (2 * i + 1) + _BLANK * (rows - i - 1)
        for i in range(rows)
    )


def pattern_22(rows: int) -> str:
    """Number pyramid: each row counts up to i and back down to 1."""
    return _text(
        _BLANK * (rows - i)
        + _cells(range(1, i + 1))
        + _cells(range(i - 1, 0, -1))
        for i in range(1, rows + 1)
    )


def pattern_23(rows: int) -> str:
    """Inverted star pyramid."""
    return _text(
        _BLANK * (rows - i) + _STAR * (2 * i - 1) for i in range(rows, 0, -1)
    )


def _wings(rows: int, widths: Iterable[int]) -> str:
    return _text(_STAR * i + _BLANK * (2 * (rows - i)) + _STAR * i for i in widths)


def pattern_24(rows: int) -> str:
    """Two star wings narrowing to the middle and widening again."""
    top = range(rows, 0, -1)
    bottom = range(1, rows + 1)
    return _wings(rows, top) + _wings(rows, bottom)


def pattern_25(rows: int) -> str:
    """Two star wings widening to the middle and narrowing again."""
    top = range(1, rows + 1)
    bottom = range(rows - 1, 0, -1)
    return _wings(rows, top) + _wings(rows, bottom)


def _spaced_stars(rows: int, widths: Iterable[int]) -> str:
    return _text(" " * (rows - i) + _STAR * i for i in widths)


def pattern_26(rows: int) -> str:
    """Star diamond with single-space indentation."""
    return _spaced_stars(rows, range(1, rows + 1)) + _spaced_stars(
        rows, range(rows - 1, 0, -1)
    )


def pattern_27(rows: int) -> str:
    """Inverted star triangle with single-space indentation."""
    return _spaced_stars(rows, range(rows, 0, -1))


PATTERNS: dict[int, Callable[[int], str]] = {
    1: pattern_1,
    2: pattern_2,
    3: pattern_3,
    4: pattern_4,
    5: pattern_5,
    6: pattern_6,
    7: pattern_7,
    8: pattern_8,
    9: pattern_9,
    10: pattern_10,
    11: pattern_11,
    12: pattern_12,
    13: pattern_13,
    14: pattern_14,
    15: pattern_15,
    16: pattern_16,
    17: pattern_17,
    18: pattern_18,
    19: pattern_19,
    20: pattern_20,
    21: pattern_21,
    22: pattern_22,
    23: pattern_23,
    24: pattern_24,
    25: pattern_25,
    26: pattern_26,
    27: pattern_27,
}


def render(number: int, rows: int) -> str:
    """Return pattern ``number`` (1 to 27) built with ``rows`` rows."""
    try:
        builder = PATTERNS[number]
    except KeyError:
        raise ValueError(f"no pattern numbered {number}") from None
    return builder(rows)