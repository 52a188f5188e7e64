"""Headless frame driver.

GameSession owns the single player and the current level and advances them
one frame at a time. The pygame engine and the Gymnasium environment both
sit on top of it, so neither reads any global input state: they pass the
frame's move direction and jump trigger in explicitly.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, List, Dict, Any

from .config import GameConfig
from .entities import Player
from .level import Level
from .physics import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of one frame."""
    hit: bool  # A spike hit the player and they were respawned
    on_ground: bool
    frame: int


class GameSession:
    """Runs a level pack: player physics, spikes, respawns, level cycling."""

    def __init__(
        self,
        levels: List[Dict[str, Any]],
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        level_index: int = 0,
    ):
        """Create session and load the first level.

        Args:
            levels: Raw level dicts (see level_io.load_level_pack)
            config: Game configuration. Uses defaults if None.
            rng: Random source for spike generation/animation
            level_index: Level to start on
        """
        if not levels:
            raise ValueError("GameSession needs at least one level")

        self.levels = levels
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random()

        self.player = Player(movement=self.config.movement)
        self.level: Optional[Level] = None
        self.level_index = 0

        self.deaths = 0
        self.frame = 0

        self.load_level(level_index)

    @classmethod
    def from_seed(cls, levels, config=None, seed=None, level_index=0) -> "GameSession":
        return cls(levels, config=config, rng=random.Random(seed), level_index=level_index)

    def load_level(self, index: int) -> Level:
        """Switch to level `index` and respawn the player there.

        The new Level is fully built before anything is swapped, so callers
        never see a half-loaded state.
        """
        if not 0 <= index < len(self.levels):
            raise ValueError(f"Unknown level index: {index} (have {len(self.levels)})")

        level = Level(self.levels[index], hazards=self.config.hazards, rng=self.rng)

        self.level = level
        self.level_index = index
        self.player.spawn_from_level(level)

        logger.info(
            "Level %d/%d '%s': %d platforms, %d spikes",
            index + 1, len(self.levels), level.name,
            len(level.platforms), len(level.spikes),
        )
        return level

    def next_level(self) -> Level:
        """Cycle to the next level in the pack (wraps around)."""
        return self.load_level((self.level_index + 1) % len(self.levels))

    def respawn(self) -> None:
        self.player.spawn_from_level(self.level)

    @property
    def world_width(self) -> float:
        return self.level.infer_width(self.config.screen_width)

    @property
    def world_height(self) -> float:
        return self.level.infer_height(self.config.screen_height)

    def step(self, move: int = 0, jump: bool = False) -> StepResult:
        """Advance one frame.

        Args:
            move: Net horizontal input (-1, 0, +1)
            jump: Jump key pressed this frame

        Returns:
            StepResult for the frame.
        """
        if jump:
            self.player.jump()

        self.player.update(move, self.level.platforms, self.world_width)

        # Spikes read the position the player just resolved to
        hit = self.level.update_and_check_hazards(self.player)
        if hit:
            self.deaths += 1
            logger.debug(
                "Spike hit at (%.1f, %.1f) on frame %d; respawning",
                self.player.x, self.player.y, self.frame,
            )
            self.respawn()

        self.frame += 1
        return StepResult(hit=hit, on_ground=self.player.on_ground, frame=self.frame)

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for observation/logging."""
        return {
            "level_index": self.level_index,
            "level_name": self.level.name,
            "player_position": self.player.position,
            "player_velocity": self.player.velocity,
            "player_radius": self.player.r,
            "player_on_ground": self.player.on_ground,
            "deaths": self.deaths,
            "frame": self.frame,
            "spikes": [s.to_dict() for s in self.level.spikes],
        }
