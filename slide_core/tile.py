from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Coord = Tuple[int, int]  # (row, col)


@dataclass(frozen=True)
class Empty:
    """A board cell with no tile on it."""


@dataclass(frozen=True)
class Occupied:
    """A board cell holding a tile with a positive value."""
    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f'Tile value must be positive, got {self.value}')


Tile = Union[Empty, Occupied]

EMPTY = Empty()


def tile_value(tile: Tile) -> int:
    """Value of a tile, 0 for an empty cell."""
    return tile.value if isinstance(tile, Occupied) else 0


def tile_from_value(value: int) -> Tile:
    return EMPTY if value == 0 else Occupied(value)


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


_KEY_ALIASES = {
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}


def parse_direction(text: Union[str, Direction]) -> Direction:
    """Accepts a Direction, its name in any case, or a w/a/s/d key."""
    if isinstance(text, Direction):
        return text
    key = str(text).strip().lower()
    if key in _KEY_ALIASES:
        return _KEY_ALIASES[key]
    try:
        return Direction(key)
    except ValueError:
        raise ValueError(f'Unknown direction: {text!r}') from None
