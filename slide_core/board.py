from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .tile import EMPTY, Coord, Occupied, Tile


class Board:
    """Square grid of tiles. Cells are reassigned, never mutated in place."""

    def __init__(self, dimension: int, initial: Tile = EMPTY) -> None:
        if dimension < 1:
            raise ValueError(f'Board dimension must be positive, got {dimension}')
        self.dimension = dimension
        self._cells: List[List[Tile]] = [[initial] * dimension for _ in range(dimension)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> 'Board':
        """Builds a board from a square list of rows."""
        n = len(rows)
        if n == 0 or any(len(row) != n for row in rows):
            raise ValueError('Board rows must form a non-empty square')
        board = cls(n)
        for r, row in enumerate(rows):
            for c, tile in enumerate(row):
                board[r, c] = tile
        return board

    def __getitem__(self, coord: Coord) -> Tile:
        r, c = coord
        return self._cells[r][c]

    def __setitem__(self, coord: Coord, tile: Tile) -> None:
        r, c = coord
        self._cells[r][c] = tile

    def set_all(self, tile: Tile) -> None:
        for row in self._cells:
            for c in range(self.dimension):
                row[c] = tile

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row-major."""
        for r in range(self.dimension):
            for c in range(self.dimension):
                yield (r, c)

    def snapshot(self) -> Tuple[Tuple[Tile, ...], ...]:
        """Immutable copy of the grid, safe to hand to renderers."""
        return tuple(tuple(row) for row in self._cells)

    def pretty(self) -> str:
        """Generates a human-readable string representation of the board."""
        width = max([len(str(t.value)) for row in self._cells for t in row if isinstance(t, Occupied)] + [1])
        lines: List[str] = []
        for row in self._cells:
            cells = [str(t.value).rjust(width) if isinstance(t, Occupied) else '.'.rjust(width) for t in row]
            lines.append(' '.join(cells))
        return '\n'.join(lines)
