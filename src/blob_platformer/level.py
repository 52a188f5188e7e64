"""One playable level: theme, physics knobs, spawn point, platforms, spikes.

A Level is built once from a raw level dict (or an already resolved
LevelConfig) and replaced wholesale when the game switches levels. Spikes
are generated at construction from the floating platforms and never
regenerated afterwards.
"""

from typing import List, Tuple, Optional, Union, Dict, Any, TYPE_CHECKING

from .config import LevelConfig, HazardConfig
from .entities import Platform, Spike
from .physics import RandomSource, default_rng

if TYPE_CHECKING:
    from .entities import Player


class Level:
    """Wraps one level description and owns its platforms and spikes."""

    def __init__(
        self,
        level: Union[LevelConfig, Dict[str, Any], None] = None,
        hazards: Optional[HazardConfig] = None,
        rng: Optional[RandomSource] = None,
    ):
        """Create level from a config or raw JSON level dict.

        Args:
            level: Resolved LevelConfig, or a raw dict (defaults applied)
            hazards: Spike generation parameters. Uses defaults if None.
            rng: Random source for spike placement and animation
        """
        if not isinstance(level, LevelConfig):
            level = LevelConfig.from_dict(level)
        self.config = level
        self.hazards = hazards or HazardConfig()
        self.rng = rng or default_rng()

        self.name = level.name
        self.theme = level.theme
        self.gravity = level.gravity
        self.jump_v = level.jump_v
        self.start = level.start

        self.platforms: Tuple[Platform, ...] = tuple(
            Platform(x, y, w, h) for x, y, w, h in level.platforms
        )
        self.spikes: List[Spike] = self.generate_spikes()

    def floating_platforms(self) -> List[Platform]:
        """Platforms above the ground row; only these carry spikes."""
        threshold = self.hazards.floating_threshold
        return [p for p in self.platforms if p.y < threshold]

    def generate_spikes(self) -> List[Spike]:
        """Scatter spikes across the floating platforms."""
        cfg = self.hazards
        spikes = []
        for p in self.floating_platforms():
            count = self.rng.randint(*cfg.spikes_per_platform)
            for _ in range(count):
                # Platforms narrower than a spike pin it to their left edge
                slack = max(0.0, p.w - cfg.spike_width)
                spikes.append(Spike(
                    x=self.rng.uniform(p.x, p.x + slack),
                    base_y=p.y,
                    width=cfg.spike_width,
                    height=cfg.spike_height,
                    speed=self.rng.uniform(*cfg.spike_speed_range),
                    moving_up=self.rng.random() < 0.5,
                    resume_probability=cfg.resume_probability,
                    rng=self.rng,
                ))
        return spikes

    def infer_width(self, default: float = 640) -> float:
        """Rightmost platform edge, or default for an empty level."""
        if not self.platforms:
            return default
        return max(p.x + p.w for p in self.platforms)

    def infer_height(self, default: float = 360) -> float:
        """Lowest platform edge, or default for an empty level."""
        if not self.platforms:
            return default
        return max(p.y + p.h for p in self.platforms)

    def update_hazards(self) -> None:
        for spike in self.spikes:
            spike.update()

    def update_and_check_hazards(self, player: "Player") -> bool:
        """Step every spike, then report whether any of them hits the player."""
        self.update_hazards()
        return any(spike.hits_player(player) for spike in self.spikes)
