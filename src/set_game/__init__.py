from .cards import (
    Card, Color, Count, Shade, Shape, DecodeError,
    DECK_SIZE, encode, decode, build_universe,
)
from .algebra import complete, third_value
from .set_finder import is_set, find_sets, find_sets_brute_force, find_first_set
from .table import Table

__all__ = [
    'Card', 'Color', 'Count', 'Shade', 'Shape', 'DecodeError',
    'DECK_SIZE', 'encode', 'decode', 'build_universe',
    'complete', 'third_value',
    'is_set', 'find_sets', 'find_sets_brute_force', 'find_first_set',
    'Table',
]
