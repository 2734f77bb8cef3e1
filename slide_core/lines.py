from __future__ import annotations

from typing import List

from .board import Board
from .tile import Coord, Direction, Tile


def coordinates_for(direction: Direction, iteration: int, dimension: int) -> List[Coord]:
    """
    Coordinates of one row or column, ordered in the direction of travel.
    Position 0 is the cell on the edge tiles move towards, so merges always
    happen towards index 0 of the returned line.
    """
    buffer: List[Coord] = []
    for i in range(dimension):
        if direction is Direction.UP:
            buffer.append((i, iteration))
        elif direction is Direction.DOWN:
            buffer.append((dimension - i - 1, iteration))
        elif direction is Direction.LEFT:
            buffer.append((iteration, i))
        else:
            buffer.append((iteration, dimension - i - 1))
    return buffer


def read_line(board: Board, coords: List[Coord]) -> List[Tile]:
    return [board[c] for c in coords]
