from __future__ import annotations

import argparse
import logging
import time
from typing import Callable

from .config import GameConfig, env_flag
from .session import GameSession


def play(
    session: GameSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Terminal game loop over a started session; returns on q or when the game is lost."""
    threshold = session.model.config.threshold
    announced = session.won
    write(session.model.pretty())
    write('Move with w/a/s/d or up/down/left/right; q quits.')

    while not session.lost:
        text = read('> ').strip()
        if text.lower() in ('q', 'quit', 'exit'):
            break
        try:
            session.move(text)
        except ValueError as e:
            write(str(e))
            continue
        # Let any paced move run before redrawing
        wait = session.scheduler.next_due()
        while wait is not None and session.model.pending_moves():
            time.sleep(wait)
            session.poll()
            wait = session.scheduler.next_due()
        results = session.drain()["results"]
        if results and not any(r["changed"] for r in results):
            write('Nothing moved.')
        write(session.model.pretty())
        write(f'Score: {session.model.current_score()}')
        if session.won and not announced:
            announced = True
            write(f'You reached {threshold}!')
    if session.lost:
        write(f'Game over. Final score: {session.model.current_score()}')


def main() -> None:
    parser = argparse.ArgumentParser(description='Slide2048 in the terminal')
    parser.add_argument('--size', type=int, default=None, help='Board size (NxN)')
    parser.add_argument('--threshold', type=int, default=None, help='Tile value that wins the game')
    parser.add_argument('--delay', type=float, default=None, help='Seconds between effective moves')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for tile spawns')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if env_flag('SLIDE_DEBUG') else logging.WARNING)

    base = GameConfig.from_env()
    config = GameConfig(
        dimension=args.size if args.size is not None else base.dimension,
        threshold=args.threshold if args.threshold is not None else base.threshold,
        max_commands=base.max_commands,
        queue_delay=args.delay if args.delay is not None else base.queue_delay,
    )
    session = GameSession(config, seed=args.seed)
    session.start()
    play(session)
