"""Configuration system for the blob platformer.

Level data arrives as loosely-shaped JSON dicts. LevelConfig resolves every
documented default exactly once, so the rest of the game only ever sees a
complete description. Tuning that is not part of the level file lives here
too:
- MovementConfig: how the blob accelerates and slows down
- HazardConfig: how spikes are generated and animated
- GameConfig: everything above plus display settings
"""

from dataclasses import dataclass, field
from typing import Tuple, Dict, Any, List, ClassVar, Optional


@dataclass
class ThemeConfig:
    """Colour strings for one level."""
    bg: str = "#F0F0F0"
    platform: str = "#C8C8C8"
    blob: str = "#1478FF"

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "ThemeConfig":
        """Merge a partial theme over the defaults."""
        d = d or {}
        defaults = cls()
        return cls(
            bg=d.get("bg", defaults.bg),
            platform=d.get("platform", defaults.platform),
            blob=d.get("blob", defaults.blob),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"bg": self.bg, "platform": self.platform, "blob": self.blob}


@dataclass
class SpawnPoint:
    """Where (and how big) the blob appears at level start and after a death."""
    x: float = 80.0
    y: float = 180.0
    r: float = 26.0

    def __post_init__(self):
        # A negative radius would flip the bounding box inside out
        self.r = max(0.0, float(self.r))

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "SpawnPoint":
        d = d or {}
        defaults = cls()
        return cls(
            x=float(d.get("x", defaults.x)),
            y=float(d.get("y", defaults.y)),
            r=float(d.get("r", defaults.r)),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "r": self.r}


@dataclass
class LevelConfig:
    """Fully resolved description of one level.

    Mirrors the JSON shape of a level entry:
        { "name": "Intro Steps", "gravity": 0.65, "jumpV": -11.0,
          "theme": {...}, "start": {...}, "platforms": [{x, y, w, h}, ...] }
    Every field is optional in the file; missing ones fall back to the
    defaults below.
    """
    name: str = "Level"
    gravity: float = 0.65  # Added to vy every frame (px/frame^2, positive = down)
    jump_v: float = -11.0  # Vertical velocity set by a jump (negative = up)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    start: SpawnPoint = field(default_factory=SpawnPoint)
    platforms: List[Tuple[float, float, float, float]] = field(default_factory=list)  # (x, y, w, h)

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "LevelConfig":
        """Create from a raw level dict, substituting defaults for anything missing."""
        d = d or {}
        platforms = []
        for p in d.get("platforms") or []:
            platforms.append((
                float(p.get("x", 0.0)),
                float(p.get("y", 0.0)),
                float(p.get("w", 0.0)),
                float(p.get("h", 0.0)),
            ))
        gravity = d.get("gravity")
        jump_v = d.get("jumpV")
        return cls(
            name=d.get("name") or "Level",
            gravity=0.65 if gravity is None else float(gravity),
            jump_v=-11.0 if jump_v is None else float(jump_v),
            theme=ThemeConfig.from_dict(d.get("theme")),
            start=SpawnPoint.from_dict(d.get("start")),
            platforms=platforms,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the JSON level shape."""
        return {
            "name": self.name,
            "gravity": self.gravity,
            "jumpV": self.jump_v,
            "theme": self.theme.to_dict(),
            "start": self.start.to_dict(),
            "platforms": [
                {"x": x, "y": y, "w": w, "h": h} for x, y, w, h in self.platforms
            ],
        }


@dataclass
class MovementConfig:
    """Blob movement tuning (per frame, not per second).

    Friction is multiplicative: each frame vx is scaled by the factor for the
    current contact state. Ground friction is stronger so the blob stops
    quickly once it lands, while in the air it keeps its momentum.
    """
    accel: float = 0.55  # vx gained per frame of held input
    max_run: float = 4.0  # |vx| cap
    friction_air: float = 0.995
    friction_ground: float = 0.88

    def to_dict(self) -> Dict[str, float]:
        return {
            "accel": self.accel,
            "max_run": self.max_run,
            "friction_air": self.friction_air,
            "friction_ground": self.friction_ground,
        }


@dataclass
class HazardConfig:
    """Spike generation and animation parameters."""
    # Platforms whose top is above this row are "floating" and get spikes.
    # Everything at or below it is treated as ground.
    floating_threshold: float = 300.0
    spike_width: float = 20.0
    spike_height: float = 40.0  # Also the maximum extension
    resume_probability: float = 0.02  # Per-frame chance a retracted spike starts rising

    SPIKE_SPEED_RANGE: ClassVar[Tuple[float, float]] = (0.8, 3.0)
    SPIKES_PER_PLATFORM: ClassVar[Tuple[int, int]] = (1, 2)

    spike_speed_range: Tuple[float, float] = SPIKE_SPEED_RANGE
    spikes_per_platform: Tuple[int, int] = SPIKES_PER_PLATFORM

    def to_dict(self) -> Dict[str, Any]:
        return {
            "floating_threshold": self.floating_threshold,
            "spike_width": self.spike_width,
            "spike_height": self.spike_height,
            "resume_probability": self.resume_probability,
            "spike_speed_range": list(self.spike_speed_range),
            "spikes_per_platform": list(self.spikes_per_platform),
        }


@dataclass
class GameConfig:
    """Complete game configuration combining all parameter groups."""
    movement: MovementConfig = field(default_factory=MovementConfig)
    hazards: HazardConfig = field(default_factory=HazardConfig)

    # Display settings; also the fallback world size for levels without platforms
    screen_width: int = 640
    screen_height: int = 360
    fps: int = 60

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary."""
        return {
            "movement": self.movement.to_dict(),
            "hazards": self.hazards.to_dict(),
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "fps": self.fps,
        }
