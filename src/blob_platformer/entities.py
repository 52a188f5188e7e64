"""Game entities: the blob player, platforms, and rising spikes.

Platforms are plain static rectangles. Spikes and the player carry mutable
per-frame state and expose an update() that the frame driver calls once per
frame, player first.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional, Sequence, Tuple, TYPE_CHECKING

from .config import MovementConfig
from .physics import Rect, RectLike, RandomSource, overlaps, box_around, default_rng

if TYPE_CHECKING:
    from .level import Level


@dataclass(frozen=True)
class Platform:
    """Static platform rectangle. Position is the top-left corner."""
    x: float
    y: float
    w: float
    h: float


class Spike:
    """Hazard that rises out of a platform top and sinks back in.

    Two-state oscillator:
    - extending (moving_up): grows by speed each frame until max_height,
      then flips to retracting on the same frame it caps
    - retracting: shrinks by speed until 0, then waits there; every frame
      spent fully retracted it starts extending again with probability
      resume_probability
    """

    def __init__(
        self,
        x: float,
        base_y: float,
        width: float = 20.0,
        height: float = 40.0,
        speed: float = 1.0,
        moving_up: bool = True,
        resume_probability: float = 0.02,
        rng: Optional[RandomSource] = None,
    ):
        """Create a spike anchored on a platform top.

        Args:
            x: Left edge
            base_y: Platform top the spike rises from
            width: Spike width
            height: Nominal height, which is also the maximum extension
            speed: Extension/retraction per frame
            moving_up: Initial direction
            resume_probability: Per-frame chance of leaving the retracted state
            rng: Random source for the resume roll
        """
        self.x = x
        self.base_y = base_y
        self.width = width
        self.height = height
        self.max_height = height
        self.current_height = 0.0
        self.speed = speed
        self.moving_up = moving_up
        self.resume_probability = resume_probability
        self.rng = rng or default_rng()

    @property
    def retracted(self) -> bool:
        return self.current_height <= 0.0

    def update(self) -> None:
        """Advance the animation by one frame."""
        if self.moving_up:
            self.current_height = min(self.current_height + self.speed, self.max_height)
            if self.current_height >= self.max_height:
                self.moving_up = False
        elif self.current_height > 0.0:
            self.current_height = max(self.current_height - self.speed, 0.0)
        elif self.rng.random() < self.resume_probability:
            self.moving_up = True

        # Keep within [0, max_height] even for negative speeds
        self.current_height = max(0.0, min(self.current_height, self.max_height))

    def hitbox(self) -> Rect:
        """Current extent; zero height while retracted."""
        return Rect(
            self.x,
            self.base_y - self.current_height,
            self.width,
            self.current_height,
        )

    def hits_player(self, player: "Player") -> bool:
        """Whether the spike's current extent overlaps the player's box."""
        if self.retracted:
            return False
        return overlaps(player.box(), self.hitbox())

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot for rendering/logging."""
        return {
            "x": self.x,
            "base_y": self.base_y,
            "width": self.width,
            "current_height": self.current_height,
            "moving_up": self.moving_up,
        }


@dataclass
class BlobVisuals:
    """Wobbly outline parameters (cosmetic only)."""
    t_speed: float = 0.01  # Noise time advanced per update
    wobble: float = 7.0  # Max radius offset in px
    points: int = 48  # Outline vertices
    wobble_freq: float = 0.9


class Player:
    """The blob: a circle of radius r that collides as a 2r x 2r box.

    Movement tuning comes from MovementConfig. Gravity and jump velocity
    are copied from the current level on spawn; the player keeps no
    reference to the level itself.
    """

    def __init__(
        self,
        movement: Optional[MovementConfig] = None,
        visuals: Optional[BlobVisuals] = None,
    ):
        self.movement = movement or MovementConfig()
        self.visuals = visuals or BlobVisuals()

        # Transform
        self.x = 0.0
        self.y = 0.0
        self.r = 26.0

        # Velocity
        self.vx = 0.0
        self.vy = 0.0

        # Overridden per level by spawn_from_level()
        self.gravity = 0.65
        self.jump_v = -11.0

        self.on_ground = False

        # Animation clock for the outline noise
        self.t = 0.0

    @property
    def accel(self) -> float:
        return self.movement.accel

    @property
    def max_run(self) -> float:
        return self.movement.max_run

    @property
    def friction_air(self) -> float:
        return self.movement.friction_air

    @property
    def friction_ground(self) -> float:
        return self.movement.friction_ground

    @property
    def position(self) -> Tuple[float, float]:
        """Current centre (x, y)."""
        return self.x, self.y

    @property
    def velocity(self) -> Tuple[float, float]:
        """Current velocity (vx, vy)."""
        return self.vx, self.vy

    def box(self) -> Rect:
        """Collision box around the current position."""
        return box_around(self.x, self.y, self.r)

    def spawn_from_level(self, level: "Level") -> None:
        """Apply level physics and (re)place the player at the level start.

        Also used for respawning after a hazard hit, so a death is nothing
        more than this reset.
        """
        self.gravity = level.gravity
        self.jump_v = level.jump_v

        self.x = level.start.x
        self.y = level.start.y
        self.r = level.start.r

        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = False

    def jump(self) -> bool:
        """Jump if standing on something. Returns whether the jump happened."""
        if not self.on_ground:
            return False
        self.vy = self.jump_v
        self.on_ground = False
        return True

    def update(
        self,
        move: int,
        platforms: Sequence[RectLike],
        world_width: float = 640.0,
    ) -> None:
        """Integrate one frame and resolve collisions against platforms.

        Args:
            move: Net horizontal input, -1 (left), 0, or +1 (right)
            platforms: Static rectangles to collide with, resolved in order
            world_width: Horizontal extent the centre is clamped into
        """
        move = max(-1, min(1, move))

        self.vx += self.accel * move
        self.vx *= self.friction_ground if self.on_ground else self.friction_air
        self.vx = max(-self.max_run, min(self.max_run, self.vx))

        # Applied even when grounded; the Y pass below cancels it again
        self.vy += self.gravity

        box = self.box()

        # X pass
        box.x += self.vx
        for s in platforms:
            if overlaps(box, s):
                if self.vx > 0:
                    box.x = s.x - box.w
                elif self.vx < 0:
                    box.x = s.x + s.w
                self.vx = 0.0

        # Y pass (on_ground is recomputed here every frame)
        box.y += self.vy
        self.on_ground = False
        for s in platforms:
            if overlaps(box, s):
                if self.vy > 0:
                    box.y = s.y - box.h
                    self.vy = 0.0
                    self.on_ground = True
                elif self.vy < 0:
                    box.y = s.y + s.h
                    self.vy = 0.0

        self.x = box.x + box.w / 2
        self.y = box.y + box.h / 2

        # Lower bound wins if the world is narrower than the blob
        self.x = max(self.r, min(world_width - self.r, self.x))

        self.t += self.visuals.t_speed
