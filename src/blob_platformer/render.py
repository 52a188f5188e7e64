"""pygame drawing for the world, spikes, the wobbly blob, and the HUD.

Nothing here feeds back into gameplay. The blob outline is a circle whose
radius is nudged per vertex by smooth noise, so it looks like it breathes.
"""

import math
from typing import List, Optional, Tuple, Union, TYPE_CHECKING

import pygame

from .entities import BlobVisuals, Player, Spike

if TYPE_CHECKING:
    from .game import GameSession
    from .level import Level


COLOR_SPIKE = (200, 55, 65)
COLOR_HUD = (0, 0, 0)

HUD_HELP = "Move: A/D or Left/Right | Jump: Space/W/Up | Next: N"


def parse_color(value: Union[str, Tuple[int, int, int]], default: str = "#000000") -> pygame.Color:
    """Convert a theme colour ("#RRGGBB" or RGB tuple) to a pygame Color.

    Unparseable values fall back to `default` rather than failing mid-frame.
    """
    try:
        return pygame.Color(value)
    except (ValueError, TypeError):
        return pygame.Color(default)


class ValueNoise:
    """Smooth 3D value noise in [0, 1], deterministic per seed."""

    def __init__(self, seed: int = 0):
        self.seed = seed

    def _lattice(self, ix: int, iy: int, iz: int) -> float:
        n = (ix * 374761393 + iy * 668265263 + iz * 2147483647 + self.seed * 144665) & 0xFFFFFFFF
        n = (n ^ (n >> 13)) * 1274126177 & 0xFFFFFFFF
        n = (n ^ (n >> 16)) & 0xFFFFFFFF
        return n / 0xFFFFFFFF

    @staticmethod
    def _fade(t: float) -> float:
        return t * t * (3 - 2 * t)

    def __call__(self, x: float, y: float, z: float) -> float:
        x0, y0, z0 = math.floor(x), math.floor(y), math.floor(z)
        fx, fy, fz = self._fade(x - x0), self._fade(y - y0), self._fade(z - z0)

        def lerp(a, b, t):
            return a + (b - a) * t

        c = self._lattice
        x00 = lerp(c(x0, y0, z0), c(x0 + 1, y0, z0), fx)
        x10 = lerp(c(x0, y0 + 1, z0), c(x0 + 1, y0 + 1, z0), fx)
        x01 = lerp(c(x0, y0, z0 + 1), c(x0 + 1, y0, z0 + 1), fx)
        x11 = lerp(c(x0, y0 + 1, z0 + 1), c(x0 + 1, y0 + 1, z0 + 1), fx)
        return lerp(lerp(x00, x10, fy), lerp(x01, x11, fy), fz)


_NOISE = ValueNoise()


def blob_outline(
    player: Player,
    visuals: Optional[BlobVisuals] = None,
    noise: ValueNoise = _NOISE,
) -> List[Tuple[float, float]]:
    """Vertices of the blob outline at the player's current animation time."""
    visuals = visuals or player.visuals
    vertices = []
    for i in range(visuals.points):
        a = i / visuals.points * math.tau
        n = noise(
            math.cos(a) * visuals.wobble_freq + 100,
            math.sin(a) * visuals.wobble_freq + 100,
            player.t,
        )
        # Map noise [0, 1] to a radius offset in [-wobble, wobble]
        rr = player.r + (n * 2 - 1) * visuals.wobble
        vertices.append((player.x + math.cos(a) * rr, player.y + math.sin(a) * rr))
    return vertices


def spike_teeth(spike: Spike, tooth_width: float = 10.0) -> List[List[Tuple[float, float]]]:
    """Triangles filling the spike's current hit-box; empty when retracted."""
    if spike.retracted or spike.width <= 0:
        return []
    count = max(1, int(spike.width // tooth_width))
    w = spike.width / count
    top = spike.base_y - spike.current_height
    teeth = []
    for i in range(count):
        left = spike.x + i * w
        teeth.append([(left, spike.base_y), (left + w / 2, top), (left + w, spike.base_y)])
    return teeth


class Renderer:
    """Draws a GameSession onto a pygame surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._font = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        return self._font

    def draw_world(self, level: "Level") -> None:
        """Background + platforms + spikes."""
        self.surface.fill(parse_color(level.theme.bg, "#F0F0F0"))

        platform_color = parse_color(level.theme.platform, "#C8C8C8")
        for p in level.platforms:
            pygame.draw.rect(
                self.surface, platform_color,
                (int(p.x), int(p.y), int(p.w), int(p.h)),
            )

        for spike in level.spikes:
            for tooth in spike_teeth(spike):
                pygame.draw.polygon(self.surface, COLOR_SPIKE, tooth)

    def draw_player(self, player: Player, color: str) -> None:
        if player.r <= 0:
            return
        pygame.draw.polygon(self.surface, parse_color(color, "#1478FF"), blob_outline(player))

    def draw_hud(self, lines: List[str]) -> None:
        y = 8
        for line in lines:
            text = self.font.render(line, True, COLOR_HUD)
            self.surface.blit(text, (10, y))
            y += 18

    def draw(self, session: "GameSession", hud: bool = True) -> None:
        """Render one full frame (no display flip)."""
        level = session.level
        self.draw_world(level)
        self.draw_player(session.player, level.theme.blob)
        if hud:
            self.draw_hud([f"{level.name}  |  Deaths: {session.deaths}", HUD_HELP])
