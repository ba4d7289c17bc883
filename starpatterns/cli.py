"""Interactive menu that draws a chosen pattern or a multiplication table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from starpatterns.patterns import PATTERNS
from starpatterns.table import multiplication_table

__all__ = ["TABLE_CHOICE", "menu", "run_choice", "main"]

TABLE_CHOICE = 28
INVALID_CHOICE = "Invalid choice. Try again.\n"
CHOICE_PROMPT = "Enter your choice: "
TABLE_PROMPT = "Enter the number whose table you want: "

_ROWS_PROMPTS: dict[int, str] = {
    **dict.fromkeys((1, 3, 4, 5, 6, 10), "Enter the number of rows:"),
    2: "Enter number of rows:",
    **dict.fromkeys((7, 8, 9, 11), "Enter the number of rows: "),
    **dict.fromkeys((12, 13, 14), "Enter number of rows : "),
    **dict.fromkeys((15, 16), "Enter number of rows: "),
    **dict.fromkeys(range(17, 28), "Enter the number of rows: "),
}

Reader = Callable[[str], str]
Writer = Callable[[str], object]


def menu() -> str:
    """Return the list of choices shown before asking for one."""
    lines = ["Choose a number to run:"]
    lines.extend(f"{number:02d}. Pattern {number}" for number in PATTERNS)
    lines.append(f"{TABLE_CHOICE}. Table of a number using while loop")
    return "".join(f"{line}\n" for line in lines)


def _read_int(read: Reader, prompt: str) -> int:
    text = read(prompt).strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"expected a whole number, got {text!r}") from None


def run_choice(choice: int, read: Reader, write: Writer) -> bool:
    """Run menu entry ``choice``, asking through ``read`` and printing through ``write``.

    ``read`` receives a prompt and returns the user's answer. Returns False
    (after reporting it) when ``choice`` is not on the menu.
    """
    if choice in PATTERNS:
        rows = _read_int(read, _ROWS_PROMPTS[choice])
        write(PATTERNS[choice](rows))
        return True
    if choice == TABLE_CHOICE:
        n = _read_int(read, TABLE_PROMPT)
        write(multiplication_table(n))
        return True
    write(INVALID_CHOICE)
    return False


def _token_reader(stream: Iterable[str], out: TextIO) -> Reader:
    tokens: Iterator[str] = (token for line in stream for token in line.split())

    def read(prompt: str) -> str:
        out.write(prompt)
        out.flush()
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("input ended before an answer was given") from None

    return read


def main(argv: list[str] | None = None) -> int:
    """Show the menu, read a choice from standard input and run it."""
    parser = argparse.ArgumentParser(
        prog="starpatterns",
        description="Draw text patterns or a multiplication table.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    read = _token_reader(sys.stdin, out)
    out.write(menu())
    try:
        choice = _read_int(read, CHOICE_PROMPT)
        run_choice(choice, read, out.write)
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())