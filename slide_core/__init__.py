"""
Slide2048 core Python package.

Move resolution and move pacing for a 2048-style sliding-tile puzzle.
Modules:
- tile.py, board.py: Tile variants, Direction, Board
- lines.py: row/column coordinates in the direction of travel
- merge.py: condense -> collapse -> convert, producing move orders
- moves.py: BoardMutator, the only writer of board and score
- move_queue.py, scheduler.py: paced move queue and its timers
- model.py, session.py: game-driving surface and a playable session
"""
