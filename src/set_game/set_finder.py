"""
Set-finding algorithm.

A valid Set consists of 3 cards where, for each attribute,
the values are either ALL THE SAME or ALL DIFFERENT.

Results are index triples (i, j, k) with i < j < k into the board that was
searched. They stay meaningful only until the caller next edits the board.
"""

import logging
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .algebra import complete, completion_ids
from .cards import Card

logger = logging.getLogger(__name__)

IndexTriple = Tuple[int, int, int]


def is_set(a: Card, b: Card, c: Card) -> bool:
    """
    Check if three cards form a valid Set.

    Any repeated card makes the triple degenerate, which is never a Set.
    """
    if a == b or b == c or a == c:
        return False
    return complete(a, b) == c


def find_sets(board: Sequence[Card]) -> List[IndexTriple]:
    """
    Find all valid Sets among the cards on the board.

    For each pair (i, j) the completing card is computed directly and looked
    up by identifier, so this is O(n^2) rather than the O(n^3) of checking
    every combination. Triples come out ordered by i, then j.

    The board must not contain duplicate cards. If it does, the lookup keeps
    the last position of each card and pairs of equal cards are skipped, so
    no spurious triple is reported but some Sets may be missed.
    """
    n = len(board)
    if n < 3:
        return []

    ids = [card.id for card in board]
    position: Dict[int, int] = {ident: pos for pos, ident in enumerate(ids)}
    if len(position) != n:
        logger.warning("Board of %d cards holds only %d distinct cards", n, len(position))

    third = completion_ids(ids)
    rows, cols = np.triu_indices(n, k=1)

    triples = []
    for i, j in zip(rows.tolist(), cols.tolist()):
        if ids[i] == ids[j]:
            continue
        k = position.get(int(third[i, j]))
        if k is not None and k > j:
            triples.append((i, j, k))

    logger.debug("Found %d set(s) on a board of %d cards", len(triples), n)
    return triples


def find_sets_brute_force(board: Sequence[Card]) -> List[IndexTriple]:
    """
    Find all valid Sets by checking every combination of 3 positions.

    For 12 cards: C(12,3) = 220 combinations.
    For 21 cards (max in real game): C(21,3) = 1330 combinations.
    Kept as the reference that find_sets is checked against.
    """
    return [
        (i, j, k)
        for i, j, k in combinations(range(len(board)), 3)
        if is_set(board[i], board[j], board[k])
    ]


def find_first_set(board: Sequence[Card]) -> Optional[IndexTriple]:
    """Find the first valid Set, or None if no Set exists."""
    sets = find_sets(board)
    return sets[0] if sets else None
