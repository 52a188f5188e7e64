"""blob-platformer: a small JSON-driven 2D platformer.

A blob player runs and jumps across static platforms while spikes rise and
fall out of the floating ones. Levels come from a JSON pack; the physics is
a frame-stepped integrator with axis-separated AABB collision resolution.
Playable through pygame or headless through a Gymnasium environment.
"""

from .config import ThemeConfig, SpawnPoint, LevelConfig, MovementConfig, HazardConfig, GameConfig
from .physics import Rect, RectLike, RandomSource, overlaps, box_around
from .entities import Player, Platform, Spike, BlobVisuals
from .level import Level
from .level_io import load_level_pack, parse_level_pack, LevelFileError
from .game import GameSession, StepResult

__all__ = [
    "ThemeConfig",
    "SpawnPoint",
    "LevelConfig",
    "MovementConfig",
    "HazardConfig",
    "GameConfig",
    "Rect",
    "RectLike",
    "RandomSource",
    "overlaps",
    "box_around",
    "Player",
    "Platform",
    "Spike",
    "BlobVisuals",
    "Level",
    "load_level_pack",
    "parse_level_pack",
    "LevelFileError",
    "GameSession",
    "StepResult",
]
