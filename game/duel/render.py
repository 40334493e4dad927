"""
Arcade window for watching and poking at a running duel

Reads snapshots only; the simulation itself is ticked by SimulationClock on
its own thread. Field coordinates grow downward, Arcade's grow upward, so
every y is flipped on the way in and out.

Controls:
    mouse move   - cursor the heroes evade
    click        - select the hero whose half was clicked
    A / L        - fire hero 0 / hero 1
    SPACE        - pause / resume
    1..4         - projectile color for the selected hero
    ESC          - clear selection
"""

from __future__ import annotations

import arcade

from .clock import SimulationClock
from .config import PALETTE
from .engine import DuelEngine


FIRE_KEYS = {
    arcade.key.A: 0,
    arcade.key.L: 1,
}

COLOR_KEYS = {
    arcade.key.KEY_1: PALETTE[0],
    arcade.key.KEY_2: PALETTE[1],
    arcade.key.KEY_3: PALETTE[2],
    arcade.key.KEY_4: PALETTE[3],
}


def to_rgb(name: str):
    """Palette name -> Arcade color"""
    return getattr(arcade.color, name.upper(), arcade.color.WHITE)


class DuelWindow(arcade.Window):
    """Arcade window for rendering the duel"""

    def __init__(self, engine: DuelEngine, title: str = "Lane Duel - Arcade"):
        super().__init__(int(engine.arena.width), int(engine.arena.height), title)
        self.engine = engine

        # Colors
        self.BG = (18, 18, 22)
        self.HUD_C = (220, 220, 220)
        self.SELECT_C = (240, 240, 240)

    def _screen_y(self, field_y: float) -> float:
        return self.height - field_y

    def on_draw(self):
        """Draw the latest snapshot"""
        self.clear()
        arcade.set_background_color(self.BG)

        snap = self.engine.snapshot()

        # Draw heroes
        for h in snap.heroes:
            y = self._screen_y(h.y)
            arcade.draw_circle_filled(h.x, y, h.radius, to_rgb(h.color))
            if snap.selected == h.index:
                arcade.draw_circle_outline(h.x, y, h.radius + 4, self.SELECT_C, 2)

        # Draw projectiles
        for p in snap.projectiles:
            arcade.draw_circle_filled(p.x, self._screen_y(p.y), p.radius, to_rgb(p.color))

        # Text HUD
        scores = "  ".join(f"Hero {h.index + 1}: {h.score}" for h in snap.heroes)
        arcade.draw_text(scores, 12, self.height - 24, self.HUD_C, 14)
        if not snap.running:
            arcade.draw_text("PAUSED", 12, self.height - 44, self.HUD_C, 14)
        if snap.selected is not None:
            h = snap.heroes[snap.selected]
            arcade.draw_text(
                f"Edit Hero {h.index + 1}: fire interval {h.fire_interval} ms, "
                f"speed {h.moving_speed} px/tick (1-4 picks projectile color)",
                12, 12, self.HUD_C, 12,
            )

    def on_mouse_motion(self, x, y, dx, dy):
        self.engine.set_cursor(x, self._screen_y(y))

    def on_mouse_press(self, x, y, button, modifiers):
        self.engine.commands.select_at(x, self._screen_y(y))

    def on_key_press(self, symbol, modifiers):
        commands = self.engine.commands
        if symbol in FIRE_KEYS and FIRE_KEYS[symbol] < self.engine.state.n_heroes:
            commands.fire(FIRE_KEYS[symbol])
        elif symbol == arcade.key.SPACE:
            commands.toggle_running()
        elif symbol in COLOR_KEYS:
            commands.choose_projectile_color(COLOR_KEYS[symbol])
        elif symbol == arcade.key.ESCAPE:
            commands.select_hero(None)


def run_window(engine: DuelEngine):
    """Tick the engine on a background clock and show it until the window closes"""
    clock = SimulationClock(engine)
    window = DuelWindow(engine)
    clock.start()
    try:
        arcade.run()
    finally:
        clock.stop()
        window.close()
