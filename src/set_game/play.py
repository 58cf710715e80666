"""
Headless Set game.

Deals a board from a seeded table, repeatedly takes the first Set the solver
finds, and refills the board until the deck runs out and no Set remains.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tqdm import tqdm

from .cards import Card, Count, Shade, Shape
from .set_finder import find_sets
from .table import MAX_SEED, Table

logger = logging.getLogger(__name__)

# === Config ===

BOARD_SIZE = 12
EXTRA_CARDS = 3

SYMBOLS = {
    Shape.DIAMOND: {Shade.SOLID: "◆", Shade.STRIPED: "⬖", Shade.OPEN: "◇"},
    Shape.OVAL: {Shade.SOLID: "●", Shade.STRIPED: "◐", Shade.OPEN: "○"},
    Shape.SQUIGGLE: {Shade.SOLID: "⧓", Shade.STRIPED: "⧑", Shade.OPEN: "⋈"},
}


@dataclass
class GameSummary:
    seed: Optional[int]
    sets_taken: List[Tuple[Card, Card, Card]] = field(default_factory=list)
    rounds: int = 0
    leftover: List[Card] = field(default_factory=list)


def describe(card: Card) -> str:
    """Human-readable label like 'two striped green squiggles'."""
    noun = card.shape.name.lower()
    if card.count != Count.ONE:
        noun += "s"
    return f"{card.count.name.lower()} {card.shade.name.lower()} {card.color.name.lower()} {noun}"


def symbol(card: Card) -> str:
    glyph = SYMBOLS[card.shape][card.shade]
    return " ".join([glyph] * (card.count + 1))


def deal_cards(table: Table, num_cards: int) -> int:
    """Deal up to num_cards onto the end of the board. Returns cards dealt."""
    board = table.board_mut()
    dealt = 0
    while dealt < num_cards:
        card = table.deal()
        if card is None:
            break
        board.append(card)
        dealt += 1
    return dealt


def deal_board(table: Table, board_size: int = BOARD_SIZE) -> int:
    """Deal until the board holds board_size cards."""
    return deal_cards(table, board_size - len(table.board_mut()))


def deal_extra(table: Table, num_cards: int = EXTRA_CARDS) -> int:
    return deal_cards(table, num_cards)


def take_set(table: Table, triple: Tuple[int, int, int]) -> Tuple[Card, Card, Card]:
    """Remove a found Set from the board, highest position first."""
    board = table.board_mut()
    cards = tuple(board[i] for i in triple)
    for i in sorted(triple, reverse=True):
        del board[i]
    return cards


def play_game(table: Table, board_size: int = BOARD_SIZE, seed: Optional[int] = None) -> GameSummary:
    """Play one game to the end and return what happened."""
    summary = GameSummary(seed=seed)
    deal_board(table, board_size)

    while True:
        summary.rounds += 1
        sets = find_sets(table.board_mut())
        if not sets:
            if deal_extra(table) == 0:
                break
            logger.debug("No set on %d cards, dealt extra", len(table.board_mut()))
            continue

        taken = take_set(table, sets[0])
        summary.sets_taken.append(taken)
        logger.debug("Took set %s", taken)
        deal_board(table, board_size)
        table.check_invariants()

    summary.leftover = list(table.board_mut())
    return summary


def print_board(board: List[Card]) -> None:
    for i, card in enumerate(board):
        print(f"  {i:2d}. {symbol(card):7s} {describe(card)}")


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Play Set games with the solver taking every set")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the deck (default: random)")
    parser.add_argument("--games", "-n", type=int, default=1, help="Number of games, using consecutive seeds")
    parser.add_argument("--board-size", type=int, default=BOARD_SIZE, help="Cards kept on the board")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    seed = args.seed if args.seed is not None else random.randrange(MAX_SEED)
    if not 0 <= seed < MAX_SEED:
        parser.error("--seed must be in [0, 2**64)")
    if args.games < 1:
        parser.error("--games must be at least 1")
    if args.board_size < 3:
        parser.error("--board-size must be at least 3")

    if args.games == 1:
        table = Table.from_seed(seed)
        deal_board(table, args.board_size)
        print(f"Seed: {seed}")
        print(f"\nDealt {len(table.board_mut())} cards:")
        print_board(table.board_mut())

        sets = find_sets(table.board_mut())
        print(f"\nFound {len(sets)} valid Set(s) on the opening board:")
        for n, triple in enumerate(sets, 1):
            print(f"  Set {n}: {triple}")

        summary = play_game(table, args.board_size, seed=seed)
        print(f"\nGame over after {summary.rounds} rounds, {len(summary.sets_taken)} Set(s) taken")
        print(f"{len(summary.leftover)} card(s) left on the board:")
        print_board(summary.leftover)
        return

    total_sets = 0
    total_leftover = 0
    for offset in tqdm(range(args.games), desc="Playing games"):
        game_seed = (seed + offset) % MAX_SEED
        summary = play_game(Table.from_seed(game_seed), args.board_size, seed=game_seed)
        total_sets += len(summary.sets_taken)
        total_leftover += len(summary.leftover)

    print(f"\nPlayed {args.games} games from seed {seed}")
    print(f"Sets taken:        {total_sets} ({total_sets / args.games:.2f} per game)")
    print(f"Cards left over:   {total_leftover} ({total_leftover / args.games:.2f} per game)")


if __name__ == "__main__":
    main()
