"""
Per-tick movement for heroes and projectiles
"""

from __future__ import annotations

from typing import Optional

from .entities import Arena, Hero
from .state import SimulationState
from .utils import Point, clamp, distance


def move_hero(hero: Hero, arena: Arena, cursor: Optional[Point]):
    """Advance one hero along its lane.

    Inside the evasion buffer the hero turns around *every* tick it stays
    there, so it jitters in place rather than steering away. Landing on
    either end of the lane reflects the direction and takes precedence over
    the evasion turn.
    """
    direction = hero.direction

    if cursor is not None and distance(hero.pos, cursor) < arena.evasion_buffer:
        direction = -direction

    new_y = clamp(hero.y + direction * hero.moving_speed, 0, arena.height)
    if new_y == 0 or new_y == arena.height:
        direction = -direction

    hero.y = new_y
    hero.direction = direction


def move_heroes(state: SimulationState, arena: Arena, cursor: Optional[Point]):
    for hero in state.heroes:
        move_hero(hero, arena, cursor)


def move_projectiles(state: SimulationState, arena: Arena):
    """Advance every projectile and drop the ones that left the field.

    The horizontal bounds are exclusive: a projectile sitting exactly on
    x == 0 or x == width is gone.
    """
    for p in state.projectiles:
        if not p.alive:
            continue

        p.x += p.direction * arena.bullet_speed

        if not 0 < p.x < arena.width:
            p.alive = False

    state.projectiles = [p for p in state.projectiles if p.alive]
