"""
Card encoding.

Every Set card is a point of (Z/3)^4: one value in {0, 1, 2} for each of
color, count, shade and shape. The compact identifier reads that tuple as a
base-3 number with color as the most significant digit:

    id = 27 * color + 9 * count + 3 * shade + shape

so card 0 is one solid red diamond and card 80 is three open purple ovals.
"""

import logging
import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)

DECK_SIZE = 81
NUM_ATTRIBUTES = 4
BASE = 3

# Place value of each attribute digit, most significant first
RANK_COLOR = BASE ** 3
RANK_COUNT = BASE ** 2
RANK_SHADE = BASE ** 1
RANK_SHAPE = 1
RANKS = (RANK_COLOR, RANK_COUNT, RANK_SHADE, RANK_SHAPE)

Attributes = Tuple[int, int, int, int]


def as_integer(value) -> int:
    """Return value as a plain int; accepts numpy integers, rejects bools and floats."""
    if isinstance(value, bool):
        raise TypeError(f"expected an integer, got {value!r}")
    return operator.index(value)


class DecodeError(ValueError):
    """Raised for an identifier outside [0, 81) or a malformed attribute tuple."""


class Color(IntEnum):
    RED = 0
    GREEN = 1
    PURPLE = 2


class Count(IntEnum):
    ONE = 0
    TWO = 1
    THREE = 2


class Shade(IntEnum):
    SOLID = 0
    STRIPED = 1
    OPEN = 2


class Shape(IntEnum):
    DIAMOND = 0
    SQUIGGLE = 1
    OVAL = 2


def encode(attributes: Iterable[int]) -> int:
    """Convert a (color, count, shade, shape) tuple to its identifier (0-80)."""
    values = tuple(attributes)
    if len(values) != NUM_ATTRIBUTES:
        raise DecodeError(f"expected {NUM_ATTRIBUTES} attribute values, got {len(values)}")
    ident = 0
    for value in values:
        try:
            digit = as_integer(value)
        except TypeError:
            raise DecodeError(f"attribute value {value!r} is not an integer") from None
        if not 0 <= digit < BASE:
            raise DecodeError(f"attribute value {value!r} is not in {{0, 1, 2}}")
        ident = ident * BASE + digit
    return ident


def decode(identifier: int) -> Attributes:
    """Convert an identifier (0-80) to its (color, count, shade, shape) tuple."""
    try:
        identifier = as_integer(identifier)
    except TypeError:
        raise DecodeError(f"card identifier must be an integer, got {identifier!r}") from None
    if not 0 <= identifier < DECK_SIZE:
        raise DecodeError(f"card identifier {identifier} is outside [0, {DECK_SIZE})")
    shape = identifier % BASE
    identifier //= BASE
    shade = identifier % BASE
    identifier //= BASE
    count = identifier % BASE
    color = identifier // BASE
    return (color, count, shade, shape)


@dataclass(frozen=True, order=True)
class Card:
    """A Set card, stored as its compact identifier."""
    id: int

    def __post_init__(self):
        # Validates the identifier; raises DecodeError
        decode(self.id)
        object.__setattr__(self, "id", as_integer(self.id))

    @classmethod
    def from_attributes(cls, attributes: Iterable[int]) -> "Card":
        return cls(encode(attributes))

    @property
    def attributes(self) -> Attributes:
        return decode(self.id)

    @property
    def color(self) -> Color:
        return Color(self.attributes[0])

    @property
    def count(self) -> Count:
        return Count(self.attributes[1])

    @property
    def shade(self) -> Shade:
        return Shade(self.attributes[2])

    @property
    def shape(self) -> Shape:
        return Shape(self.attributes[3])

    def __repr__(self):
        return (f"Card({self.id}: {self.count.name.lower()} {self.shade.name.lower()} "
                f"{self.color.name.lower()} {self.shape.name.lower()})")


def build_universe() -> Tuple[Card, ...]:
    """Build all 81 distinct cards, ordered by identifier."""
    universe = tuple(Card(i) for i in range(DECK_SIZE))
    logger.debug("Built card universe of %d cards", len(universe))
    return universe
