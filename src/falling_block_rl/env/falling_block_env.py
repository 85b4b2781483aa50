from __future__ import annotations

from dataclasses import replace
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_block_rl.game import GRID_HEIGHT, GRID_WIDTH, FallingBlockGame, GameConfig, Intent
from falling_block_rl.visualization.palette import color_for_value


class EnvAction(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    FAST_DROP = 4


_ACTION_TO_INTENT = {
    EnvAction.NONE: Intent.NONE,
    EnvAction.LEFT: Intent.MOVE_LEFT,
    EnvAction.RIGHT: Intent.MOVE_RIGHT,
    EnvAction.ROTATE: Intent.ROTATE_UP,
    EnvAction.FAST_DROP: Intent.NONE,
}


class FallingBlockEnv(gym.Env):
    """Falling block game as a Gymnasium environment.

    Each step applies one action and then advances the game by `frame_dt`
    seconds. FAST_DROP holds the fast-drop key for that step only.

    Reward is always 0.0; agents compute their own from the info dict.
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 frame_dt: float = 1.0 / 60.0,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        if frame_dt <= 0:
            raise ValueError(f"frame_dt must be positive, got {frame_dt}")
        # Episodes need a terminal state
        config = replace(config or GameConfig(), detect_game_over=True)
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        self.frame_dt = float(frame_dt)
        self.max_episode_steps = int(max_episode_steps)

        self.observation_space = spaces.Box(low=-7, high=7, shape=(GRID_HEIGHT, GRID_WIDTH), dtype=np.int8)
        self.action_space = spaces.Discrete(len(EnvAction))

        self._steps = 0
        self._last_tick = False

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "pieces_locked": self.game.pieces_locked,
            "gravity_tick": self._last_tick,
            "steps": self._steps,
            "game_over": self.game.game_over,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        self._last_tick = False
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = EnvAction(int(action))

        self.game.apply(_ACTION_TO_INTENT[action])
        self.game.set_fast_drop(action == EnvAction.FAST_DROP)
        self._last_tick = self.game.update(self.frame_dt)
        self._steps += 1

        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), 0.0, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            # Create a simple RGB image from the grid
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(grid[y, x]))
            return img
        # human rendering delegated to external UI; noop
        return None

    def close(self) -> None:
        pass
