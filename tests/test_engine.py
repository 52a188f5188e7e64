"""Tests for the interactive pygame front-end (headless)."""

import pygame
import pytest

from blob_platformer.config import GameConfig
from blob_platformer.engine import BlobEngine


@pytest.fixture
def engine(bundled_levels):
    e = BlobEngine(levels=bundled_levels, seed=0)
    yield e
    pygame.quit()


def press(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


class TestBlobEngine:
    def test_initialization(self, engine):
        assert engine.session.level_index == 0
        assert engine.screen.get_size() == (640, 360)
        assert not engine.running

    def test_update_advances_session(self, engine):
        engine.update()
        assert engine.session.frame == 1
        assert engine.read_move() == 0

    def test_jump_key_is_edge_triggered(self, engine):
        for _ in range(60):
            engine.update()
        assert engine.session.player.on_ground

        press(pygame.K_SPACE)
        engine.handle_events()
        engine.update()
        assert engine.session.player.vy < 0
        assert not engine._jump_pressed

    def test_next_level_key(self, engine, capsys):
        press(pygame.K_n)
        engine.handle_events()
        assert engine.session.level_index == 1
        # Window follows the level's inferred size
        assert engine.screen.get_size() == (760, 360)
        assert "LEVEL 2/" in capsys.readouterr().out

    def test_respawn_key(self, engine):
        for _ in range(30):
            engine.update()
        press(pygame.K_r)
        engine.handle_events()
        start = engine.session.level.start
        assert engine.session.player.position == (start.x, start.y)

    def test_escape_stops(self, engine):
        engine.running = True
        press(pygame.K_ESCAPE)
        engine.handle_events()
        assert not engine.running

    def test_run_exits_on_quit(self, bundled_levels):
        engine = BlobEngine(levels=bundled_levels, config=GameConfig(fps=1000), seed=0)
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        engine.run()
        assert not engine.running
        assert engine.session.frame == 0
