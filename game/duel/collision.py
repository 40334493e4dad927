"""
Projectile vs hero hit detection and scoring
"""

from __future__ import annotations

from typing import List, Tuple

from loguru import logger

from .entities import Arena
from .state import SimulationState
from .utils import within_radius


def resolve_hits(state: SimulationState, arena: Arena) -> List[Tuple[int, int]]:
    """Score and retire every projectile that touches a hero other than its owner.

    Heroes are tested in index order and the first one hit wins; a projectile
    scores at most once. Returns (owner, victim) pairs in the order they
    happened.
    """
    contact = arena.bullet_radius + arena.hero_radius
    hits: List[Tuple[int, int]] = []

    for p in state.projectiles:
        if not p.alive:
            continue
        for hero in state.heroes:
            if hero.index == p.owner:
                continue
            if within_radius(p.pos, hero.pos, contact):
                state.heroes[p.owner].score += 1
                p.alive = False
                hits.append((p.owner, hero.index))
                logger.trace(f"Hero {p.owner} hit hero {hero.index} (score {state.heroes[p.owner].score})")
                break

    # Cleanup after hits
    state.projectiles = [p for p in state.projectiles if p.alive]
    return hits
