from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0', environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return str(env.get(name, default)).lower() in TRUTHY


@dataclass(frozen=True)
class GameConfig:
    """Constants fixed for the lifetime of a game model."""
    dimension: int = 4
    threshold: int = 2048
    max_commands: int = 100
    queue_delay: float = 0.3  # seconds between effective moves

    def __post_init__(self) -> None:
        if self.dimension < 2:
            raise ValueError(f'dimension must be at least 2, got {self.dimension}')
        if self.threshold <= 0:
            raise ValueError(f'threshold must be positive, got {self.threshold}')
        if self.max_commands < 0:
            raise ValueError(f'max_commands must not be negative, got {self.max_commands}')
        if self.queue_delay < 0:
            raise ValueError(f'queue_delay must not be negative, got {self.queue_delay}')

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'GameConfig':
        """
        Reads overrides from SLIDE_DIMENSION, SLIDE_THRESHOLD, SLIDE_MAX_COMMANDS
        and SLIDE_QUEUE_DELAY. Unset variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        try:
            return cls(
                dimension=int(env.get('SLIDE_DIMENSION', defaults.dimension)),
                threshold=int(env.get('SLIDE_THRESHOLD', defaults.threshold)),
                max_commands=int(env.get('SLIDE_MAX_COMMANDS', defaults.max_commands)),
                queue_delay=float(env.get('SLIDE_QUEUE_DELAY', defaults.queue_delay)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f'Invalid game configuration in environment: {e}') from e
