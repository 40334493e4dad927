"""
CommandInterface - operations external callers invoke between ticks
-------------------------------------------------------------------
- fire / configure / set_running / select_hero (the command surface)
- hero_at / select_at / choose_projectile_color (click and palette adapters)

Every command takes the engine lock, so a command issued while a tick is in
progress lands after that tick: a projectile fired "during" tick N is first
moved by tick N+1.
"""

from __future__ import annotations

import numbers
import threading
from typing import Any, Callable, Dict, Mapping, Optional

from loguru import logger

from .config import (
    FIRE_INTERVAL_RANGE,
    MOVING_SPEED_RANGE,
    PALETTE,
)
from .entities import Arena, Projectile
from .errors import ConfigurationError
from .state import SimulationState


def _check_color(value: Any) -> str:
    if value not in PALETTE:
        raise ConfigurationError(f"projectile_color must be one of {PALETTE}, got {value!r}")
    return value


def _check_range(name: str, lo: float, hi: float) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ConfigurationError(f"{name} must be a number, got {value!r}")
        if not lo <= value <= hi:
            raise ConfigurationError(f"{name} must be within [{lo}, {hi}], got {value!r}")
        return value
    return check


_VALIDATORS: Dict[str, Callable[[Any], Any]] = {
    "projectile_color": _check_color,
    "fire_interval": _check_range("fire_interval", *FIRE_INTERVAL_RANGE),
    "moving_speed": _check_range("moving_speed", *MOVING_SPEED_RANGE),
}
CONFIGURABLE_FIELDS = tuple(_VALIDATORS)


class CommandInterface:
    """Fire, configure, pause/resume and select on a shared SimulationState"""

    def __init__(
        self,
        state: SimulationState,
        arena: Arena,
        lock: threading.RLock,
        period_ms: float,
        enforce_fire_interval: bool = False,
    ):
        self.state = state
        self.arena = arena
        self.lock = lock
        self.period_ms = period_ms
        self.enforce_fire_interval = enforce_fire_interval

    @property
    def now_ms(self) -> float:
        """Simulation time, derived from the tick counter"""
        return self.state.tick * self.period_ms

    def fire(self, index: int) -> Optional[Projectile]:
        """Spawn a projectile at the hero's leading edge.

        Returns the projectile, or None when fire-interval gating is enabled
        and the hero fired too recently.
        """
        with self.lock:
            hero = self.state.hero(index)

            if self.enforce_fire_interval and hero.last_fired_ms is not None:
                if self.now_ms - hero.last_fired_ms < hero.fire_interval:
                    return None

            projectile = Projectile(
                x=hero.x + hero.facing * self.arena.hero_radius,
                y=hero.y,
                direction=hero.facing,
                owner=hero.index,
                color=hero.projectile_color,
                radius=self.arena.bullet_radius,
            )
            self.state.add_projectile(projectile)
            hero.last_fired_ms = self.now_ms

        logger.trace(f"Hero {hero.index} fired at ({projectile.x:.0f}, {projectile.y:.0f})")
        return projectile

    def configure(self, index: int, patch: Mapping[str, Any]):
        """Apply a partial update to projectile_color / fire_interval / moving_speed.

        The whole patch is validated first; on any error nothing is written.
        """
        with self.lock:
            hero = self.state.hero(index)

            unknown = [name for name in patch if name not in _VALIDATORS]
            if unknown:
                logger.warning(f"Rejected configure for hero {index}: unknown fields {unknown}")
                raise ConfigurationError(
                    f"cannot configure {unknown}; allowed fields are {CONFIGURABLE_FIELDS}"
                )

            try:
                checked = {name: _VALIDATORS[name](value) for name, value in patch.items()}
            except ConfigurationError as e:
                logger.warning(f"Rejected configure for hero {index}: {e}")
                raise

            for name, value in checked.items():
                setattr(hero, name, value)

        if checked:
            logger.info(f"Hero {index} reconfigured: {checked}")

    def set_running(self, running: bool):
        with self.lock:
            changed = self.state.running != bool(running)
            self.state.running = bool(running)
        if changed:
            logger.info("Simulation resumed" if running else "Simulation paused")

    def toggle_running(self) -> bool:
        with self.lock:
            running = not self.state.running
            self.set_running(running)
        return running

    def select_hero(self, index: Optional[int]):
        """UI selection only; no effect on the simulation"""
        with self.lock:
            if index is not None:
                index = self.state.check_index(index)
            self.state.selected = index

    # ----------------------------
    # Input adapters
    # ----------------------------

    def hero_at(self, x: float, y: float) -> Optional[int]:
        """Map a click to the hero whose vertical strip contains it.

        The field is split into equal strips, one per hero (halves for a
        duel). Clicks exactly on a strip boundary, or outside the field, pick
        nobody.
        """
        if not 0 <= y < self.arena.height or not 0 <= x < self.arena.width:
            return None
        n = self.state.n_heroes
        strip = self.arena.width / n
        index = int(x // strip)
        if index > 0 and x == index * strip:
            return None
        return min(index, n - 1)

    def select_at(self, x: float, y: float) -> Optional[int]:
        index = self.hero_at(x, y)
        if index is not None:
            self.select_hero(index)
        return index

    def choose_projectile_color(self, color: str):
        """Recolor the selected hero's projectiles, then close the selection"""
        with self.lock:
            index = self.state.selected
            if index is None:
                return
            self.configure(index, {"projectile_color": color})
            self.state.selected = None
