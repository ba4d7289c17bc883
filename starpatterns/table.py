"""Multiplication table of a single number."""

from __future__ import annotations

__all__ = ["TABLE_LENGTH", "multiplication_table"]

TABLE_LENGTH = 10


def multiplication_table(n: int) -> str:
    """Return the table of ``n`` from 1 to 10, one ``n x i = n*i`` line each."""
    return "".join(f"{n} x {i} = {n * i}\n" for i in range(1, TABLE_LENGTH + 1))