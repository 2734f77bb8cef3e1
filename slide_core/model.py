from __future__ import annotations

import random
from typing import List, Optional, Tuple, Union

from .board import Board
from .config import GameConfig
from .delegate import GameDelegate, NullDelegate
from .move_queue import Completion, MoveQueue
from .moves import BoardMutator
from .rules import empty_cells, has_lost, has_won
from .scheduler import DeferredScheduler, Scheduler
from .tile import EMPTY, Coord, Direction, Tile, parse_direction


class GameModel:
    """Game-driving surface: queued moves, tile insertion and board scans."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        delegate: Optional[GameDelegate] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.delegate = delegate or NullDelegate()
        self.scheduler = scheduler if scheduler is not None else DeferredScheduler()
        self.rng = rng or random.Random()
        self._mutator = BoardMutator(Board(self.config.dimension, EMPTY), self.delegate)
        self._queue = MoveQueue(
            self._mutator.apply_direction,
            self.scheduler,
            max_commands=self.config.max_commands,
            delay=self.config.queue_delay,
        )

    @property
    def dimension(self) -> int:
        return self.config.dimension

    def submit_move(self, direction: Union[str, Direction], on_completion: Optional[Completion] = None) -> bool:
        """Queues a move. on_completion receives whether the board changed; dropped requests never complete."""
        return self._queue.enqueue(parse_direction(direction), on_completion)

    def pending_moves(self) -> int:
        return len(self._queue)

    def reset(self) -> None:
        self._queue.clear()
        self._mutator.reset()

    def board_snapshot(self) -> Tuple[Tuple[Tile, ...], ...]:
        return self._mutator.board.snapshot()

    def current_score(self) -> int:
        return self._mutator.score

    def empty_cells(self) -> List[Coord]:
        return empty_cells(self._mutator.board)

    def insert_tile(self, location: Coord, value: int) -> bool:
        return self._mutator.insert_tile(location, value)

    def insert_tile_at_random_location(self, value: int) -> Optional[Coord]:
        return self._mutator.insert_tile_at_random_location(value, self.rng)

    def user_has_won(self) -> Tuple[bool, Optional[Coord]]:
        return has_won(self._mutator.board, self.config.threshold)

    def user_has_lost(self) -> bool:
        return has_lost(self._mutator.board)

    def pretty(self) -> str:
        return self._mutator.board.pretty()
