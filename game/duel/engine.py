"""
DuelEngine - one authoritative simulation, stepped one tick at a time
--------------------------------------------------------------------
- Owns the SimulationState, the Arena, the cursor cell and the lock
- step(): heroes move, then projectiles move, then hits are scored
- snapshot(): immutable copy for renderers, never taken mid-tick
- commands: the CommandInterface bound to the same state and lock

Quick test:
    engine = DuelEngine()
    engine.commands.fire(0)
    engine.step()
    print(engine.snapshot().to_dict())
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .collision import resolve_hits
from .commands import CommandInterface
from .config import ARENA_CONFIG, CLOCK_CONFIG, RULES_CONFIG
from .entities import Arena, Cursor, Snapshot
from .movement import move_heroes, move_projectiles
from .state import SimulationState


class DuelEngine:
    """Lane duel simulation with a thread-safe command surface"""

    def __init__(
        self,
        heroes: Optional[Iterable[Dict[str, Any]]] = None,
        arena: Optional[Arena] = None,
        period_ms: float = CLOCK_CONFIG["period_ms"],
        enforce_fire_interval: bool = RULES_CONFIG["enforce_fire_interval"],
    ):
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")

        self.arena = arena if arena is not None else Arena(**ARENA_CONFIG)
        self.period_ms = period_ms
        self.state = SimulationState(heroes)
        self.lock = threading.RLock()

        # Latest-value cell written by input capture, read once per tick
        self._cursor = Cursor()
        self.last_hits: List[Tuple[int, int]] = []

        self.commands = CommandInterface(
            self.state,
            self.arena,
            self.lock,
            period_ms=period_ms,
            enforce_fire_interval=enforce_fire_interval,
        )

    # ----------------------------
    # Input
    # ----------------------------

    def set_cursor(self, x: float, y: float):
        with self.lock:
            self._cursor = Cursor(x, y)

    def clear_cursor(self):
        with self.lock:
            self._cursor = Cursor()

    @property
    def cursor(self) -> Optional[Tuple[float, float]]:
        return self._cursor.pos

    # ----------------------------
    # Tick
    # ----------------------------

    @property
    def running(self) -> bool:
        return self.state.running

    def step(self) -> bool:
        """Run one tick. Returns False (and changes nothing) while paused."""
        with self.lock:
            if not self.state.running:
                return False

            cursor = self._cursor.pos
            move_heroes(self.state, self.arena, cursor)
            move_projectiles(self.state, self.arena)
            self.last_hits = resolve_hits(self.state, self.arena)
            self.state.tick += 1
            return True

    def snapshot(self) -> Snapshot:
        with self.lock:
            return self.state.snapshot(self.arena, cursor=self._cursor.pos)

    def reset(self):
        with self.lock:
            self.state.reset()
            self._cursor = Cursor()
            self.last_hits = []
