from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from .tile import Occupied, Tile


# ---------- Action tokens (intermediate, one per surviving tile) ----------

@dataclass(frozen=True)
class NoAction:
    """Tile present, has not moved and has not merged."""
    source: int
    value: int


@dataclass(frozen=True)
class Move:
    """Tile present, has moved and has not merged."""
    source: int
    value: int


@dataclass(frozen=True)
class SingleCombine:
    """A stationary tile merged with one incoming tile; source is the incoming one."""
    source: int
    value: int


@dataclass(frozen=True)
class DoubleCombine:
    """Two tiles that both moved into the same cell."""
    source: int
    second: int
    value: int


Token = Union[NoAction, Move, SingleCombine, DoubleCombine]


# ---------- Move orders (what the board and renderer see) ----------

@dataclass(frozen=True)
class SingleMove:
    source: int
    destination: int
    value: int
    was_merge: bool


@dataclass(frozen=True)
class DoubleMove:
    source: int
    second: int
    destination: int
    value: int


MoveOrder = Union[SingleMove, DoubleMove]


def condense(line: Sequence[Tile]) -> List[Token]:
    """Drops empty cells; tiles that had to shift become Move tokens."""
    buffer: List[Token] = []
    for idx, tile in enumerate(line):
        if not isinstance(tile, Occupied):
            continue
        if len(buffer) == idx:
            buffer.append(NoAction(idx, tile.value))
        else:
            buffer.append(Move(idx, tile.value))
    return buffer


def _still_quiescent(position: int, output_length: int, source: int) -> bool:
    return position == output_length and source == position


def collapse(tokens: Sequence[Token]) -> List[Token]:
    """
    Merges adjacent equal-valued tokens pairwise, leading edge first.
    A token consumed by a merge is never looked at again, so three equal
    tiles give one merged tile plus one leftover.

    A NoAction token stays NoAction only while it is quiescent: nothing
    before it has been merged away and it never shifted in condense.
    Otherwise it is reclassified as a Move.
    """
    buffer: List[Token] = []
    skip_next = False
    for idx, token in enumerate(tokens):
        if skip_next:
            skip_next = False
            continue
        assert isinstance(token, (NoAction, Move)), f'Cannot have {type(token).__name__} token in input'
        quiescent = isinstance(token, NoAction) and _still_quiescent(idx, len(buffer), token.source)
        nxt = tokens[idx + 1] if idx + 1 < len(tokens) else None
        if nxt is not None and nxt.value == token.value:
            skip_next = True
            merged = token.value + nxt.value
            if quiescent:
                buffer.append(SingleCombine(nxt.source, merged))
            else:
                buffer.append(DoubleCombine(token.source, nxt.source, merged))
        elif isinstance(token, NoAction) and not quiescent:
            buffer.append(Move(token.source, token.value))
        else:
            buffer.append(token)
    return buffer


def convert(tokens: Sequence[Token]) -> List[MoveOrder]:
    """Turns collapsed tokens into move orders; a token's position is its destination."""
    orders: List[MoveOrder] = []
    for idx, token in enumerate(tokens):
        if isinstance(token, Move):
            orders.append(SingleMove(token.source, idx, token.value, was_merge=False))
        elif isinstance(token, SingleCombine):
            orders.append(SingleMove(token.source, idx, token.value, was_merge=True))
        elif isinstance(token, DoubleCombine):
            orders.append(DoubleMove(token.source, token.second, idx, token.value))
        elif isinstance(token, NoAction):
            continue
        else:
            raise TypeError(f'Unknown token: {token!r}')
    return orders


def resolve(line: Sequence[Tile]) -> List[MoveOrder]:
    """Move orders for one line, index 0 being the edge tiles slide towards."""
    return convert(collapse(condense(line)))


def is_merge(order: MoveOrder) -> bool:
    return isinstance(order, DoubleMove) or order.was_merge


def sources(order: MoveOrder) -> List[int]:
    if isinstance(order, DoubleMove):
        return [order.source, order.second]
    return [order.source]
