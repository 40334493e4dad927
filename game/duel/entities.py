"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .config import ARENA_CONFIG


@dataclass(frozen=True)
class Arena:
    """Field bounds and the fixed sizes/speeds shared by every actor"""
    width: float = ARENA_CONFIG["width"]
    height: float = ARENA_CONFIG["height"]
    hero_radius: float = ARENA_CONFIG["hero_radius"]
    bullet_radius: float = ARENA_CONFIG["bullet_radius"]
    bullet_speed: float = ARENA_CONFIG["bullet_speed"]
    evasion_buffer: float = ARENA_CONFIG["evasion_buffer"]


@dataclass
class Hero:
    """Lane-bound hero. Only y moves; x and facing are fixed at creation."""
    index: int
    x: float
    y: float
    color: str
    facing: int = 1      # +1 fires right, -1 fires left
    direction: int = 1   # +1 down the lane, -1 up
    score: int = 0
    projectile_color: str = "blue"
    fire_interval: int = 1000  # ms
    moving_speed: float = 2.0  # px per tick
    last_fired_ms: Optional[float] = None

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Projectile:
    """Horizontally travelling shot, credited to its owner on a hit"""
    x: float
    y: float
    direction: int
    owner: int
    color: str
    radius: float = ARENA_CONFIG["bullet_radius"]
    alive: bool = True

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Cursor:
    """Latest pointer position; x/y stay None until the first input arrives"""
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def defined(self) -> bool:
        return self.x is not None and self.y is not None

    @property
    def pos(self) -> Optional[Tuple[float, float]]:
        if not self.defined:
            return None
        return (self.x, self.y)


# ----------------------------
# Immutable views handed to renderers
# ----------------------------

@dataclass(frozen=True)
class HeroView:
    index: int
    x: float
    y: float
    radius: float
    color: str
    direction: int
    score: int
    projectile_color: str
    fire_interval: int
    moving_speed: float

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "color": self.color,
            "direction": self.direction,
            "score": self.score,
            "projectile_color": self.projectile_color,
            "fire_interval": self.fire_interval,
            "moving_speed": self.moving_speed,
        }


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    radius: float
    color: str
    direction: int
    owner: int

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "color": self.color,
            "direction": self.direction,
            "owner": self.owner,
        }


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time copy of the simulation state, safe to read from any thread"""
    tick: int
    running: bool
    selected: Optional[int]
    heroes: Tuple[HeroView, ...] = field(default_factory=tuple)
    projectiles: Tuple[ProjectileView, ...] = field(default_factory=tuple)
    cursor: Optional[Tuple[float, float]] = None

    @property
    def scores(self) -> Tuple[int, ...]:
        return tuple(h.score for h in self.heroes)

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "running": self.running,
            "selected": self.selected,
            "heroes": [h.to_dict() for h in self.heroes],
            "projectiles": [p.to_dict() for p in self.projectiles],
            "cursor": list(self.cursor) if self.cursor is not None else None,
        }
