from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .board import Board
from .tile import Coord, Occupied


def empty_cells(board: Board) -> List[Coord]:
    """Coordinates of all empty cells, row-major."""
    return [c for c in board.coords() if not isinstance(board[c], Occupied)]


def _same_value(board: Board, coord: Coord, value: int) -> bool:
    tile = board[coord]
    return isinstance(tile, Occupied) and tile.value == value


def has_won(board: Board, threshold: int) -> Tuple[bool, Optional[Coord]]:
    """First cell whose tile reached the threshold, if any."""
    for coord in board.coords():
        tile = board[coord]
        if isinstance(tile, Occupied) and tile.value >= threshold:
            return True, coord
    return False, None


def has_lost(board: Board) -> bool:
    """True when the board is full and no two neighbours can merge."""
    if empty_cells(board):
        return False
    n = board.dimension
    for r, c in board.coords():
        tile = board[r, c]
        assert isinstance(tile, Occupied), 'Board reported itself as full, but an empty tile was found'
        if r < n - 1 and _same_value(board, (r + 1, c), tile.value):
            return False
        if c < n - 1 and _same_value(board, (r, c + 1), tile.value):
            return False
    return True


def random_tile_value(rng: random.Random) -> int:
    """A new tile is a 4 one time in ten, otherwise a 2."""
    return 4 if rng.randrange(10) == 1 else 2
