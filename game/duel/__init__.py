"""Lane duel module - two lane-bound heroes trading shots"""

from .engine import DuelEngine
from .clock import SimulationClock
from .duel_env import DuelEnv
from .entities import Arena, Hero, Projectile, Snapshot
from .errors import DuelError, InvalidHeroError, ConfigurationError

__all__ = [
    'DuelEngine',
    'SimulationClock',
    'DuelEnv',
    'Arena',
    'Hero',
    'Projectile',
    'Snapshot',
    'DuelError',
    'InvalidHeroError',
    'ConfigurationError',
]
