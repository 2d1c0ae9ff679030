from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetris_engine.game import Action, GameConfig, GameState, TetrisEngine
from tetris_engine.game.pieces import NUM_COLORS


class TetrisEnv(gym.Env):
    """Drives a TetrisEngine one command at a time.

    Gravity is applied after every ``gravity_every`` environment steps, which
    plays the role of the caller-owned timer. The reward is the score gained.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        gravity_every: int = 1,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        if gravity_every < 1:
            raise ValueError(f"gravity_every must be >= 1, got {gravity_every}")
        self.engine = TetrisEngine(config)
        self.gravity_every = int(gravity_every)
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.engine.height, self.engine.width
        self.observation_space = spaces.Box(low=0, high=NUM_COLORS, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.engine.snapshot().board_with_piece().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.engine.score,
            "lines_cleared_total": self.engine.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng.seed(seed)
        self.engine.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.engine.score
        self.engine.apply(Action(int(action)))
        self._steps += 1
        if self._steps % self.gravity_every == 0:
            self.engine.step()

        reward = float(self.engine.score - score_before)
        terminated = self.engine.state == GameState.GAMEOVER
        truncated = not terminated and self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()
