from __future__ import annotations

import logging
import random
import time
from typing import Any, Callable, Dict, List, Optional, Union

from .board import Board
from .config import GameConfig
from .delegate import EventRecorder
from .model import GameModel
from .rules import random_tile_value
from .scheduler import DeferredScheduler
from .tile import Direction, Occupied, parse_direction

logger = logging.getLogger(__name__)


class GameSession:
    """
    One playable game: a model wired to an event recorder and a poll-driven
    scheduler. Every effective move spawns a new tile, like the classic game.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.recorder = EventRecorder()
        self.scheduler = DeferredScheduler(clock=clock)
        self.model = GameModel(config, self.recorder, self.scheduler, random.Random(seed))
        self.won = False
        self.lost = False
        self.results: List[Dict[str, Any]] = []

    def start(self) -> None:
        """Clears the board and spawns the two starting tiles."""
        self.model.reset()
        self.won = self.lost = False
        self.results = []
        for _ in range(2):
            self.model.insert_tile_at_random_location(random_tile_value(self.model.rng))
        logger.info("new game %dx%d", self.model.dimension, self.model.dimension)

    def load(self, board: Board) -> None:
        """Clears the game and copies the tiles of board onto it, without spawning."""
        if board.dimension != self.model.dimension:
            raise ValueError(f"board is {board.dimension}x{board.dimension}, game is {self.model.dimension}x{self.model.dimension}")
        self.model.reset()
        self.won = self.lost = False
        self.results = []
        for coord in board.coords():
            tile = board[coord]
            if isinstance(tile, Occupied):
                self.model.insert_tile(coord, tile.value)
        self.won = self.model.user_has_won()[0]
        self.lost = self.model.user_has_lost()

    def _on_move_done(self, direction: Direction, changed: bool) -> None:
        self.results.append({"direction": direction.value, "changed": changed})
        if not changed:
            return
        won, at = self.model.user_has_won()
        if won and not self.won:
            self.won = True
            logger.info("threshold %d reached at %s", self.model.config.threshold, at)
        self.model.insert_tile_at_random_location(random_tile_value(self.model.rng))
        if self.model.user_has_lost():
            self.lost = True
            logger.info("no moves left, final score %d", self.model.current_score())

    def move(self, direction: Union[str, Direction]) -> bool:
        """Queues a move; False if the queue dropped it."""
        d = parse_direction(direction)
        self.scheduler.run_pending()
        return self.model.submit_move(d, lambda changed: self._on_move_done(d, changed))

    def poll(self) -> int:
        """Runs pacing timers that are due; returns how many fired."""
        return self.scheduler.run_pending()

    def drain(self) -> Dict[str, Any]:
        """Events and move results accumulated since the last drain."""
        results, self.results = self.results, []
        return {"events": self.recorder.drain(), "results": results}

    def to_json(self) -> Dict[str, Any]:
        grid = [[t.value if isinstance(t, Occupied) else 0 for t in row] for row in self.model.board_snapshot()]
        return {
            "dimension": self.model.dimension,
            "board": grid,
            "score": self.model.current_score(),
            "won": self.won,
            "lost": self.lost,
            "pending": self.model.pending_moves(),
        }
