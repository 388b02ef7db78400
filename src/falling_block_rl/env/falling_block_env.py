from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_block_rl.game import (
    PIECE_COLORS,
    Action,
    FallingBlockGame,
    GameConfig,
    TetrominoType,
)


# Agent-facing actions; pausing is left to human play.
ENV_ACTIONS = (
    Action.LEFT,
    Action.RIGHT,
    Action.ROTATE,
    Action.SOFT_DROP,
    Action.HARD_DROP,
    Action.NONE,
)


class FallingBlockEnv(gym.Env):
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 reward_weights: Optional[Dict[str, float]] = None,
                 gravity_every: int = 1,
                 max_episode_steps: int = 10000,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        if gravity_every < 0:
            raise ValueError(f"gravity_every must be >= 0, got {gravity_every}")
        self.gravity_every = int(gravity_every)
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)
        self.reward_weights: Dict[str, float] = {
            "score": 0.01,       # per engine score point
            "lines": 1.0,        # per line cleared
            "holes": 0.1,        # penalize holes created
            "height": 0.02,      # penalize max height increase
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        h, w = self.game.config.height, self.game.config.width
        n_kinds = len(TetrominoType)
        self.observation_space = spaces.Dict(
            {
                # Locked cells are positive kind values, the falling piece negative.
                "grid": spaces.Box(low=-n_kinds, high=n_kinds, shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(n_kinds + 1),
            }
        )
        self.action_space = spaces.Discrete(len(ENV_ACTIONS))

        self._steps = 0
        self._last_obs: Optional[Dict[str, Any]] = None

    def _get_obs(self) -> Dict[str, Any]:
        nxt = self.game.next_piece
        return {
            "grid": self.game.get_state().astype(np.int8),
            "next_piece": 0 if nxt is None else int(nxt.kind),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_locked": self.game.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.start(seed)
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        index = int(action)
        if not 0 <= index < len(ENV_ACTIONS):
            raise ValueError(f"invalid action {action!r}")

        grid_before = self.game.grid
        score_before = self.game.score
        lines_before = self.game.lines_cleared_total

        self.game.step(ENV_ACTIONS[index])
        self._steps += 1
        if self.gravity_every and self._steps % self.gravity_every == 0:
            self.game.tick()

        grid_after = self.game.grid
        reward_components: Dict[str, float] = {
            "score": self.reward_weights["score"] * float(self.game.score - score_before),
            "lines": self.reward_weights["lines"] * float(self.game.lines_cleared_total - lines_before),
        }
        if grid_after is not grid_before:
            reward_components["holes"] = -self.reward_weights["holes"] * float(
                max(0, grid_after.count_holes() - grid_before.count_holes()))
            reward_components["height"] = -self.reward_weights["height"] * float(
                max(0, grid_after.get_max_height() - grid_before.get_max_height()))

        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty

        reward = float(sum(reward_components.values()))
        obs = self._get_obs()
        info = self._get_info()
        info["reward_components"] = reward_components
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._last_obs["grid"] if self._last_obs is not None else self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = abs(int(grid[y, x]))
                    color = PIECE_COLORS[TetrominoType(v)] if v else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        # human rendering delegated to external UI; noop
        return None

    def close(self) -> None:
        pass
