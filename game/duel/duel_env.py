"""
DuelEnv - Gymnasium wrapper around the lane duel simulation
-----------------------------------------------------------
- One env step == one simulation tick
- MultiBinary action: element i fires hero i before the tick
- Vector observation: hero lanes + cursor + first K projectiles
- Reward from hero 0's point of view: its hits minus hero 1's hits

The heroes steer themselves (patrol + cursor evasion); drivers only decide
when to fire. Place the cursor with `reset(options={"cursor": (x, y)})` or
`env.engine.set_cursor(x, y)`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG
from .engine import DuelEngine
from .utils import clamp, seed_everything


class DuelEnv(gym.Env):
    """Lane duel as a Gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = ENV_CONFIG["max_steps"],
        k_projectiles: int = ENV_CONFIG["k_projectiles"],
        engine: Optional[DuelEngine] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.max_steps = max_steps
        self.k_projectiles = k_projectiles

        self.engine = engine if engine is not None else DuelEngine()
        self.n_heroes = self.engine.state.n_heroes

        # Fire flag per hero
        self.action_space = spaces.MultiBinary(self.n_heroes)

        # Each hero: y(1) direction(1)
        # Cursor: x(1) y(1) present(1)
        # Each projectile: x(1) y(1) direction(1) owned-by-hero-0(1)
        obs_dim = self.n_heroes * 2 + 3 + self.k_projectiles * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._prev_scores = self.engine.snapshot().scores

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self.engine.reset()
        cursor = (options or {}).get("cursor")
        if cursor is not None:
            self.engine.set_cursor(*cursor)

        self._step_count = 0
        self._prev_scores = self.engine.snapshot().scores
        return self._get_obs(), self._get_info()

    def step(self, action):
        fire = np.asarray(action).reshape(-1)
        for index, flag in enumerate(fire[: self.n_heroes]):
            if flag:
                self.engine.commands.fire(index)

        self.engine.step()
        self._step_count += 1

        scores = self.engine.snapshot().scores
        reward = self._compute_reward(self._prev_scores, scores)
        self._prev_scores = scores

        terminated = False
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        snap = self.engine.snapshot()
        width, height = self.engine.arena.width, self.engine.arena.height

        obs_parts: List[float] = []
        for h in snap.heroes:
            obs_parts += [(h.y / height) * 2 - 1, float(h.direction)]

        if snap.cursor is not None:
            cx, cy = snap.cursor
            obs_parts += [
                clamp((cx / width) * 2 - 1, -1, 1),
                clamp((cy / height) * 2 - 1, -1, 1),
                1.0,
            ]
        else:
            obs_parts += [0.0, 0.0, -1.0]

        for i in range(self.k_projectiles):
            if i < len(snap.projectiles):
                p = snap.projectiles[i]
                obs_parts += [
                    clamp((p.x / width) * 2 - 1, -1, 1),
                    clamp((p.y / height) * 2 - 1, -1, 1),
                    float(p.direction),
                    1.0 if p.owner == 0 else -1.0,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, prev_scores, scores) -> float:
        if len(scores) < 2:
            return float(scores[0] - prev_scores[0])
        gained = scores[0] - prev_scores[0]
        conceded = scores[1] - prev_scores[1]
        return float(gained - conceded)

    def _get_info(self) -> Dict[str, Any]:
        snap = self.engine.snapshot()
        return {
            "scores": snap.scores,
            "num_projectiles": len(snap.projectiles),
            "tick": snap.tick,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .render import DuelWindow
            self._window = DuelWindow(self.engine)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
