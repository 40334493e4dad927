"""
SimulationState - the actor store
---------------------------------
Single owner of every hero and in-flight projectile plus the running flag.
Subsystems receive the state object and mutate it in place; renderers only
ever see `Snapshot` copies produced by `snapshot()`.
"""

from __future__ import annotations

import numbers
from typing import Iterable, List, Optional, Dict, Any

from .config import HERO_CONFIGS
from .entities import Arena, Hero, Projectile, HeroView, ProjectileView, Snapshot
from .errors import InvalidHeroError


class SimulationState:
    """Heroes + projectiles + running flag"""

    def __init__(self, heroes: Optional[Iterable[Dict[str, Any]]] = None, running: bool = True):
        hero_configs = list(heroes) if heroes is not None else HERO_CONFIGS
        if not hero_configs:
            raise ValueError("at least one hero is required")

        self._hero_configs = [dict(cfg) for cfg in hero_configs]
        self.heroes: List[Hero] = []
        self.projectiles: List[Projectile] = []
        self.running = running
        self.selected: Optional[int] = None
        self.tick = 0
        self._spawn_heroes()

    def _spawn_heroes(self):
        self.heroes = [Hero(index=i, **cfg) for i, cfg in enumerate(self._hero_configs)]

    def reset(self):
        """Back to the starting line-up: fresh heroes, no projectiles, running"""
        self._spawn_heroes()
        self.projectiles = []
        self.running = True
        self.selected = None
        self.tick = 0

    # ----------------------------
    # Lookups
    # ----------------------------

    @property
    def n_heroes(self) -> int:
        return len(self.heroes)

    def check_index(self, index) -> int:
        # bool is an int subclass; True/False are never valid hero indices
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise InvalidHeroError(index, len(self.heroes))
        if not 0 <= index < len(self.heroes):
            raise InvalidHeroError(index, len(self.heroes))
        return int(index)

    def hero(self, index: int) -> Hero:
        return self.heroes[self.check_index(index)]

    def add_projectile(self, projectile: Projectile) -> Projectile:
        self.check_index(projectile.owner)
        self.projectiles.append(projectile)
        return projectile

    # ----------------------------
    # Views
    # ----------------------------

    def snapshot(self, arena: Arena, cursor=None) -> Snapshot:
        heroes = tuple(
            HeroView(
                index=h.index,
                x=h.x,
                y=h.y,
                radius=arena.hero_radius,
                color=h.color,
                direction=h.direction,
                score=h.score,
                projectile_color=h.projectile_color,
                fire_interval=h.fire_interval,
                moving_speed=h.moving_speed,
            )
            for h in self.heroes
        )
        projectiles = tuple(
            ProjectileView(
                x=p.x,
                y=p.y,
                radius=p.radius,
                color=p.color,
                direction=p.direction,
                owner=p.owner,
            )
            for p in self.projectiles
        )
        return Snapshot(
            tick=self.tick,
            running=self.running,
            selected=self.selected,
            heroes=heroes,
            projectiles=projectiles,
            cursor=cursor,
        )
