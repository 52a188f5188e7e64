"""Gymnasium environment wrapper for the blob platformer.

Provides the standard Gym API over GameSession so scripted or learned
agents can play the same levels as a human, headless.
"""

import numpy as np
import gymnasium
from gymnasium import spaces
from typing import Optional, Dict, Any, List

from .config import GameConfig
from .game import GameSession
from .level_io import load_level_pack


# Action index -> net horizontal input
MOVE_ACTIONS = (-1, 0, 1)


class BlobPlatformerEnv(gymnasium.Env):
    """Gymnasium wrapper for the blob platformer.

    Observation space: float32 array of shape (8,):
        [0-1] player centre (x, y)
        [2-3] player velocity (vx, vy)
        [4]   on ground (0/1)
        [5]   player radius
        [6]   horizontal offset from player to the nearest spike centre
        [7]   that spike's current extension

    Action space (Dict):
        'move': Discrete(3) - 0 left, 1 none, 2 right
        'jump': Discrete(2) - jump trigger

    Reward = weighted sum of raw signals (stored in info['reward_signals']):
        progress: delta_x (rightward movement in pixels)
        death:    1.0 on a spike hit or a fall out of the world
        step:     1.0 every step

    Unlike the interactive game, a spike hit ends the episode.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(
        self,
        levels: Optional[List[Dict[str, Any]]] = None,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        level_index: int = 0,
        max_episode_steps: int = 1000,
        reward_weights: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        self.levels = levels if levels is not None else load_level_pack()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.level_index = level_index
        self.max_episode_steps = max_episode_steps

        self.reward_weights = reward_weights or {
            "progress": 1.0,
            "death": -10.0,
            "step": -0.01,
        }

        self.action_space = spaces.Dict({
            "move": spaces.Discrete(len(MOVE_ACTIONS)),
            "jump": spaces.Discrete(2),
        })
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(8,), dtype=np.float32,
        )

        self.session: Optional[GameSession] = None
        self._episode_steps = 0
        self._surface = None
        self._renderer = None

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)
        options = options or {}

        level_index = options.get("level_index", self.level_index)
        level_seed = int(self.np_random.integers(0, 2**31))
        self.session = GameSession.from_seed(
            self.levels, config=self.config, seed=level_seed, level_index=level_index,
        )
        self._episode_steps = 0
        self._surface = None
        self._renderer = None

        return self._get_obs(), self._get_info()

    def step(self, action):
        assert self.session is not None, "Must call reset() before step()"

        move = MOVE_ACTIONS[int(np.asarray(action["move"]).item())]
        jump = bool(int(np.asarray(action["jump"]).item()))

        x_before = self.session.player.x
        result = self.session.step(move=move, jump=jump)
        self._episode_steps += 1

        player = self.session.player
        fell = player.y - player.r > self.session.world_height
        dead = result.hit or fell

        signals = {
            # A hit respawns the player, so the position jump is not progress
            "progress": 0.0 if result.hit else player.x - x_before,
            "death": 1.0 if dead else 0.0,
            "step": 1.0,
        }
        reward = sum(self.reward_weights.get(k, 0.0) * v for k, v in signals.items())

        terminated = dead
        truncated = self._episode_steps >= self.max_episode_steps

        info = self._get_info()
        info["reward_signals"] = signals
        info["death_cause"] = "spike" if result.hit else "fall" if fell else None

        return self._get_obs(), float(reward), terminated, truncated, info

    def _nearest_spike(self):
        player = self.session.player
        spikes = self.session.level.spikes
        if not spikes:
            return None
        return min(spikes, key=lambda s: abs(s.x + s.width / 2 - player.x))

    def _get_obs(self) -> np.ndarray:
        obs = np.zeros(8, dtype=np.float32)
        player = self.session.player
        obs[0] = player.x
        obs[1] = player.y
        obs[2] = player.vx
        obs[3] = player.vy
        obs[4] = float(player.on_ground)
        obs[5] = player.r

        spike = self._nearest_spike()
        if spike is not None:
            obs[6] = spike.x + spike.width / 2 - player.x
            obs[7] = spike.current_height
        return obs

    def _get_info(self) -> Dict[str, Any]:
        return {
            "episode_steps": self._episode_steps,
            "level_index": self.session.level_index,
            "level_name": self.session.level.name,
            "deaths": self.session.deaths,
            "player_position": self.session.player.position,
        }

    def render(self):
        if self.render_mode != "rgb_array" or self.session is None:
            return None

        # Imported lazily so state-only use never initialises pygame
        import pygame
        from .render import Renderer

        size = (int(self.session.world_width), int(self.session.world_height))
        if self._surface is None or self._surface.get_size() != size:
            self._surface = pygame.Surface(size)
            self._renderer = Renderer(self._surface)

        self._renderer.draw(self.session, hud=False)
        # surfarray gives (W, H, 3); transpose to (H, W, 3)
        array = pygame.surfarray.array3d(self._surface)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)

    def close(self):
        self._surface = None
        self._renderer = None
