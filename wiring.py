# wiring.py
"""Alphabet positions and the shift/unshift lookup shared by every wheel."""
from __future__ import annotations

import string
from collections.abc import Sequence

ALPHABET = string.ascii_lowercase
SIZE = len(ALPHABET)


def wrap_sub(lhs: int, rhs: int) -> int:
    """``lhs - rhs`` folded back into 0‥25."""
    if rhs <= lhs:
        return lhs - rhs
    return SIZE - (rhs - lhs)


def shift_translate(table: Sequence[int], offset: int, signal: int) -> int:
    """Look *signal* up in *table* as seen through a wheel turned by *offset*."""
    idx = (signal + offset) % SIZE
    return wrap_sub(table[idx], offset)


def table_from_letters(wiring: str) -> list[int]:
    """``"EKMF…"`` → ``[4, 10, 12, 5, …]``; must be a permutation of the alphabet."""
    letters = wiring.lower()
    if sorted(letters) != list(ALPHABET):
        raise ValueError(f"wiring {wiring!r} must be a permutation of the alphabet")
    return [ALPHABET.index(c) for c in letters]


def invert(table: Sequence[int]) -> list[int]:
    inverse = [0] * len(table)
    for i, mapped in enumerate(table):
        inverse[mapped] = i
    return inverse


def is_involution(table: Sequence[int]) -> bool:
    """True if table[table[i]] == i for all i."""
    return all(table[mapped] == i for i, mapped in enumerate(table))
