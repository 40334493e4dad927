"""SimulationClock - fixed-rate tick driver, independent of the render loop."""

from __future__ import annotations

import threading
import time
from typing import Optional

from loguru import logger

from .engine import DuelEngine


class SimulationClock:
    def __init__(self, engine: DuelEngine, period_ms: Optional[float] = None) -> None:
        if period_ms is None:
            period_ms = engine.period_ms
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self._engine = engine
        self._period = period_ms / 1000.0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def period_ms(self) -> float:
        return self._period * 1000.0

    @property
    def tick_number(self) -> int:
        """The engine's tick counter; paused attempts do not count and reset() zeroes it."""
        return self._engine.state.tick

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def step(self) -> bool:
        return self._engine.step()

    def run(self, n: int) -> int:
        """Attempt n ticks back to back; returns how many ran."""
        ran = 0
        for _ in range(n):
            if self.step():
                ran += 1
        return ran

    def _loop(self, stop_event: threading.Event) -> None:
        period = self._period
        while not stop_event.is_set():
            start = time.monotonic()
            self.step()
            elapsed = time.monotonic() - start
            sleep_time = period - elapsed
            if sleep_time > 0:
                stop_event.wait(sleep_time)

    def start(self) -> None:
        if self.is_alive:
            if self._stop_event.is_set():
                # A timed-out stop() left the old loop running; it exits on its own
                logger.warning("Simulation clock is still stopping; not starting a second loop")
            return
        # Each run gets its own event so a later start() cannot revive an old loop
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._loop, args=(self._stop_event,), name="sim-tick", daemon=True
        )
        self._thread.start()
        logger.info(f"Simulation clock started ({self.period_ms:.0f} ms period)")

    def stop(self, timeout: Optional[float] = 1.0) -> None:
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning(f"Simulation clock thread did not stop within {timeout}s")
            return
        self._thread = None
        logger.info(f"Simulation clock stopped at tick {self.tick_number}")
