"""Interactive pygame front-end.

Polls the keyboard, feeds the move direction and jump trigger into a
GameSession each frame, and draws the result with Renderer.
"""

from typing import Optional, List, Dict, Any

import pygame

from .config import GameConfig
from .game import GameSession
from .level_io import load_level_pack
from .render import Renderer


JUMP_KEYS = (pygame.K_SPACE, pygame.K_w, pygame.K_UP)
LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


class BlobEngine:
    """Main game engine coordinating input, the session, and rendering.

    Handles:
    - Game loop at a fixed frame rate
    - Held-key movement and press-to-jump
    - Level cycling (N) and manual respawn (R)
    - Resizing the window to each level's geometry
    """

    def __init__(
        self,
        levels: Optional[List[Dict[str, Any]]] = None,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        level_index: int = 0,
    ):
        """Initialize game engine.

        Args:
            levels: Raw level dicts. Loads the bundled pack if None.
            config: Game configuration. Uses defaults if None.
            seed: Seed for spike placement/animation (None = random)
            level_index: Level to start on
        """
        self.config = config or GameConfig()
        levels = levels if levels is not None else load_level_pack()

        pygame.init()
        pygame.display.set_caption("Blob Platformer")
        self.clock = pygame.time.Clock()

        self.session = GameSession.from_seed(
            levels, config=self.config, seed=seed, level_index=level_index,
        )
        self.screen = self._resize_to_level()
        self.renderer = Renderer(self.screen)

        self.running = False
        self._jump_pressed = False

    def _resize_to_level(self) -> pygame.Surface:
        """Fit the window to the current level's inferred size."""
        size = (int(self.session.world_width), int(self.session.world_height))
        return pygame.display.set_mode(size)

    def _on_level_loaded(self) -> None:
        self.screen = self._resize_to_level()
        self.renderer = Renderer(self.screen)
        level = self.session.level
        print(f"LEVEL {self.session.level_index + 1}/{len(self.session.levels)}: {level.name} | "
              f"{len(level.platforms)} platforms, {len(level.spikes)} spikes")

    def next_level(self) -> None:
        self.session.next_level()
        self._on_level_loaded()

    def handle_events(self) -> None:
        """Process pygame events. Jump is edge-triggered on key press."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in JUMP_KEYS:
                    self._jump_pressed = True
                elif event.key == pygame.K_n:
                    self.next_level()
                elif event.key == pygame.K_r:
                    self.session.respawn()

    def read_move(self) -> int:
        """Net horizontal input from held keys; both directions cancel out."""
        keys = pygame.key.get_pressed()
        move = 0
        if any(keys[k] for k in LEFT_KEYS):
            move -= 1
        if any(keys[k] for k in RIGHT_KEYS):
            move += 1
        return move

    def update(self) -> None:
        """Advance the session by one frame using the current input."""
        self.session.step(move=self.read_move(), jump=self._jump_pressed)
        self._jump_pressed = False

    def render(self) -> None:
        self.renderer.draw(self.session)
        pygame.display.flip()

    def run(self) -> None:
        """Main game loop."""
        self.running = True
        self._on_level_loaded()

        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.update()
            self.render()
            self.clock.tick(self.config.fps)

        pygame.quit()
