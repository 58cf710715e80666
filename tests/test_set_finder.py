import itertools
import logging
import random

import pytest

from set_game.cards import Card, build_universe, decode
from set_game.set_finder import find_first_set, find_sets, find_sets_brute_force, is_set


def cards(*ids):
    return [Card(i) for i in ids]


def test_scenario_all_different():
    board = cards(0, 40, 80)
    assert is_set(*board)
    assert find_sets(board) == [(0, 1, 2)]


def test_scenario_repeated_card_is_not_a_set():
    a, b = Card(0), Card(1)
    assert decode(0) == decode(0)
    assert not is_set(a, a, b)
    assert not is_set(a, b, a)
    assert not is_set(b, a, a)
    assert not is_set(a, a, a)


def test_scenario_one_attribute_differs():
    # shape only
    assert find_sets(cards(0, 1, 2)) == [(0, 1, 2)]
    # color only, in a scrambled order
    assert find_sets(cards(54, 0, 27)) == [(0, 1, 2)]


def test_scenario_no_set():
    board = cards(0, 1, 3, 4)
    assert find_sets(board) == []
    assert find_first_set(board) is None


def test_is_set_mixed_examples():
    # red one solid diamond, green two solid diamond, purple three solid diamond
    assert is_set(Card(0), Card(36), Card(72))
    # shade differs on only two of three
    assert not is_set(Card(0), Card(36), Card(75))


def test_is_set_symmetric():
    universe = build_universe()
    rng = random.Random(7)
    triples = [tuple(rng.sample(universe, 3)) for _ in range(200)]
    triples += [(Card(0), Card(40), Card(80)), (Card(5), Card(6), Card(7))]
    for triple in triples:
        results = {is_set(*perm) for perm in itertools.permutations(triple)}
        assert len(results) == 1


def test_small_boards():
    assert find_sets([]) == []
    assert find_sets(cards(0, 40)) == []


@pytest.mark.parametrize("size", range(3, 22))
def test_matches_brute_force_on_random_boards(size):
    universe = build_universe()
    rng = random.Random(size)
    for _ in range(25):
        board = rng.sample(universe, size)
        fast = find_sets(board)
        assert fast == find_sets_brute_force(board)
        for i, j, k in fast:
            assert i < j < k
            assert is_set(board[i], board[j], board[k])


def test_full_universe_has_1080_sets():
    sets = find_sets(build_universe())
    assert len(sets) == 1080
    assert len(set(sets)) == 1080


def test_results_ordered_by_first_then_second_position():
    board = build_universe()[:27]
    sets = find_sets(board)
    assert sets == sorted(sets)


def test_find_first_set():
    assert find_first_set(cards(5, 0, 40, 80)) == (1, 2, 3)


def test_stale_indices_after_board_edit():
    board = cards(0, 40, 80, 5)
    triple = find_sets(board)[0]
    assert triple == (0, 1, 2)

    del board[0]
    i, j, k = triple
    assert not is_set(board[i], board[j], board[k])
    assert find_sets(board) == []


def test_duplicate_cards_never_give_spurious_sets(caplog):
    board = cards(0, 0, 1, 2)
    with caplog.at_level(logging.WARNING):
        sets = find_sets(board)
    assert "distinct" in caplog.text
    for i, j, k in sets:
        assert is_set(board[i], board[j], board[k])
    assert (1, 2, 3) in sets
