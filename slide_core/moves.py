from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .board import Board
from .delegate import GameDelegate
from .lines import coordinates_for, read_line
from .merge import DoubleMove, MoveOrder, SingleMove, resolve
from .rules import empty_cells
from .tile import EMPTY, Coord, Direction, Occupied

logger = logging.getLogger(__name__)


class BoardMutator:
    """
    Sole owner of the board and the score. Applies move orders line by line
    and reports every relocation, merge and insertion to the delegate.
    """

    def __init__(self, board: Board, delegate: GameDelegate) -> None:
        self.board = board
        self.delegate = delegate
        self.score = 0

    def _add_score(self, value: int) -> None:
        self.score += value
        self.delegate.on_score_changed(self.score)

    def reset(self) -> None:
        self.score = 0
        self.delegate.on_score_changed(self.score)
        self.board.set_all(EMPTY)

    def apply_orders(self, coords: Sequence[Coord], orders: Sequence[MoveOrder]) -> None:
        """Writes one line's move orders back to the board, in order."""
        for order in orders:
            dest = coords[order.destination]
            if isinstance(order, SingleMove):
                src = coords[order.source]
                if order.was_merge:
                    self._add_score(order.value)
                self.board[src] = EMPTY
                self.board[dest] = Occupied(order.value)
                self.delegate.on_tile_moved(src, dest, order.value)
            elif isinstance(order, DoubleMove):
                first, second = coords[order.source], coords[order.second]
                self._add_score(order.value)
                self.board[first] = EMPTY
                self.board[second] = EMPTY
                self.board[dest] = Occupied(order.value)
                self.delegate.on_tiles_merged(first, second, dest, order.value)
            else:
                raise TypeError(f'Unknown move order: {order!r}')

    def apply_direction(self, direction: Direction) -> bool:
        """Slides every line of the board towards direction; True if anything moved."""
        n = self.board.dimension
        moved = False
        for iteration in range(n):
            coords = coordinates_for(direction, iteration, n)
            orders: List[MoveOrder] = resolve(read_line(self.board, coords))
            if orders:
                moved = True
                self.apply_orders(coords, orders)
        logger.debug("move %s changed=%s score=%d", direction.value, moved, self.score)
        return moved

    def insert_tile(self, location: Coord, value: int) -> bool:
        """Places a tile in an empty cell; an occupied cell is left alone."""
        if isinstance(self.board[location], Occupied):
            return False
        self.board[location] = Occupied(value)
        self.delegate.on_tile_inserted(location, value)
        return True

    def pick_empty_cell(self, rng: random.Random) -> Optional[Coord]:
        """Uniform choice among the empty cells, None when the board is full."""
        spots = empty_cells(self.board)
        if not spots:
            return None
        return spots[rng.randrange(len(spots))]

    def insert_tile_at_random_location(self, value: int, rng: random.Random) -> Optional[Coord]:
        location = self.pick_empty_cell(rng)
        if location is None:
            return None
        self.insert_tile(location, value)
        logger.debug("inserted %d at %s", value, location)
        return location
