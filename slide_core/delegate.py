from __future__ import annotations

from typing import Any, Dict, List, Protocol

from .tile import Coord


class GameDelegate(Protocol):
    """Notifications a renderer receives as the board changes. Never awaited."""

    def on_score_changed(self, score: int) -> None: ...

    def on_tile_moved(self, source: Coord, destination: Coord, value: int) -> None: ...

    def on_tiles_merged(self, first: Coord, second: Coord, destination: Coord, value: int) -> None: ...

    def on_tile_inserted(self, location: Coord, value: int) -> None: ...


class NullDelegate:
    """Delegate that ignores every notification."""

    def on_score_changed(self, score: int) -> None:
        pass

    def on_tile_moved(self, source: Coord, destination: Coord, value: int) -> None:
        pass

    def on_tiles_merged(self, first: Coord, second: Coord, destination: Coord, value: int) -> None:
        pass

    def on_tile_inserted(self, location: Coord, value: int) -> None:
        pass


def _rc(c: Coord) -> List[int]:
    return [int(c[0]), int(c[1])]


class EventRecorder:
    """
    Delegate that records notifications as JSON-ready dicts, in order.
    Used by the web app and CLI to hand animations to a client.
    """

    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def drain(self) -> List[Dict[str, Any]]:
        """Returns recorded events and forgets them."""
        out, self.events = self.events, []
        return out

    def on_score_changed(self, score: int) -> None:
        self.events.append({"type": "score", "score": int(score)})

    def on_tile_moved(self, source: Coord, destination: Coord, value: int) -> None:
        self.events.append({"type": "move", "from": _rc(source), "to": _rc(destination), "value": int(value)})

    def on_tiles_merged(self, first: Coord, second: Coord, destination: Coord, value: int) -> None:
        self.events.append({
            "type": "merge",
            "from": [_rc(first), _rc(second)],
            "to": _rc(destination),
            "value": int(value),
        })

    def on_tile_inserted(self, location: Coord, value: int) -> None:
        self.events.append({"type": "insert", "at": _rc(location), "value": int(value)})
