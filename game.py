from __future__ import annotations

# Facade module that re-exports Slide2048 core functionality.
# Used by the Flask app and tests; single-responsibility modules live under slide_core/*.

from slide_core.tile import (  # noqa: F401
    EMPTY,
    Coord,
    Direction,
    Empty,
    Occupied,
    Tile,
    parse_direction,
    tile_from_value,
    tile_value,
)
from slide_core.board import Board  # noqa: F401
from slide_core.config import GameConfig  # noqa: F401
from slide_core.lines import coordinates_for, read_line  # noqa: F401
from slide_core.merge import (  # noqa: F401
    DoubleCombine,
    DoubleMove,
    Move,
    MoveOrder,
    NoAction,
    SingleCombine,
    SingleMove,
    collapse,
    condense,
    convert,
    is_merge,
    resolve,
    sources,
)
from slide_core.moves import BoardMutator  # noqa: F401
from slide_core.move_queue import MoveCommand, MoveQueue  # noqa: F401
from slide_core.scheduler import AsyncioScheduler, DeferredScheduler  # noqa: F401
from slide_core.delegate import EventRecorder, NullDelegate  # noqa: F401
from slide_core.rules import empty_cells, has_lost, has_won, random_tile_value  # noqa: F401
from slide_core.model import GameModel  # noqa: F401
from slide_core.session import GameSession  # noqa: F401


def main() -> None:
    # CLI driver delegated to slide_core.cli
    from slide_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
