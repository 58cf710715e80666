"""
Game state: the undealt deck and the visible board.
"""

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cards import Card, as_integer, build_universe

logger = logging.getLogger(__name__)

MAX_SEED = 2 ** 64


class Table:
    """
    The full game state.

    The deck is dealt from its end. The board is owned by the caller: the
    table never adds, removes or reorders board cards on its own, so index
    triples returned by find_sets stay valid until the caller edits the board.
    """

    def __init__(self, deck: Iterable[Card]):
        self.deck: List[Card] = list(deck)
        self._board: List[Card] = []
        assert len(set(self.deck)) == len(self.deck), "deck contains duplicate cards"
        logger.debug("New table with %d cards in the deck", len(self.deck))

    @classmethod
    def from_seed(cls, seed: int) -> "Table":
        """Set up a fresh game with the full deck shuffled by a seeded PCG64 generator."""
        message = f"seed must be an integer in [0, 2**64), got {seed!r}"
        try:
            value = as_integer(seed)
        except TypeError:
            raise ValueError(message) from None
        if not 0 <= value < MAX_SEED:
            raise ValueError(message)
        universe = build_universe()
        rng = np.random.default_rng(value)
        order = rng.permutation(len(universe))
        return cls(universe[i] for i in order.tolist())

    def deal(self) -> Optional[Card]:
        """Deal a single card from the deck, or None once it is exhausted."""
        if not self.deck:
            return None
        return self.deck.pop()

    def board_mut(self) -> List[Card]:
        """
        Give direct access to the board list.

        Any edit through this list invalidates index triples from earlier
        find_sets calls. Callers must not place a card on the board twice.
        """
        return self._board

    @property
    def board(self) -> Tuple[Card, ...]:
        return tuple(self._board)

    @property
    def remaining(self) -> int:
        return len(self.deck)

    def check_invariants(self) -> None:
        """Assert that no card appears twice across deck and board."""
        cards = self.deck + self._board
        assert len(set(cards)) == len(cards), "duplicate card across deck and board"
