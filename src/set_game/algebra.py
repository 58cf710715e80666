"""
Field arithmetic on card attributes.

Each attribute value is an element of Z/3. Three values are "all the same or
all different" exactly when they sum to 0 mod 3, so the value completing
x and y is -(x + y) mod 3. Applied per attribute this gives the one card that
turns any two distinct cards into a Set.

Arithmetic on the compact identifier modulo 81 is NOT equivalent: Z/81 is
cyclic, while (Z/3)^4 has every non-zero element of order 3.
"""

from typing import Sequence

import numpy as np

from .cards import BASE, RANKS, Card, decode, encode

_RANKS = np.array(RANKS, dtype=np.int64)


def add(x: int, y: int) -> int:
    return (x + y) % BASE


def neg(x: int) -> int:
    return -x % BASE


def third_value(x: int, y: int) -> int:
    """Return z such that x, y, z are all equal or pairwise distinct."""
    return neg(add(x, y))


def complete(a: Card, b: Card) -> Card:
    """
    Return the unique card forming a Set with a and b.

    Raises ValueError when a == b; two copies of one card have no completion.
    """
    if a == b:
        raise ValueError(f"cannot complete a pair of identical cards ({a!r})")
    return Card(encode(third_value(x, y) for x, y in zip(decode(a.id), decode(b.id))))


def attribute_matrix(ids: Sequence[int]) -> np.ndarray:
    """Return an (n, 4) int array of attribute tuples for the given identifiers."""
    if len(ids) == 0:
        return np.zeros((0, len(RANKS)), dtype=np.int64)
    return np.array([decode(i) for i in ids], dtype=np.int64)


def completion_ids(ids: Sequence[int]) -> np.ndarray:
    """
    Compute completions for every pair at once.

    Returns an (n, n) array whose [i, j] entry is the identifier of
    complete(ids[i], ids[j]). Diagonal entries equal ids[i] itself
    (-(2x) = x mod 3) and carry no meaning.
    """
    attrs = attribute_matrix(ids)
    third = np.mod(-(attrs[:, None, :] + attrs[None, :, :]), BASE)
    return third @ _RANKS
