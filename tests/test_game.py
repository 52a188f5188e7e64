"""Tests for the headless frame driver."""

import pytest

from blob_platformer.config import GameConfig, HazardConfig
from blob_platformer.entities import Spike
from blob_platformer.game import GameSession, StepResult


def settle(session, frames=60):
    for _ in range(frames):
        session.step()


class TestSessionSetup:
    def test_requires_levels(self):
        with pytest.raises(ValueError):
            GameSession([])

    def test_spawns_on_first_level(self, bundled_levels):
        session = GameSession.from_seed(bundled_levels, seed=0)
        assert session.level_index == 0
        assert session.level.name == "Intro Steps"
        assert session.player.position == (80, 220)
        assert session.player.r == 26
        assert session.player.velocity == (0, 0)
        assert not session.player.on_ground

    def test_start_level(self, bundled_levels):
        session = GameSession.from_seed(bundled_levels, seed=0, level_index=1)
        assert session.level.name == "Moon Hop"
        assert session.player.gravity == 0.35

    def test_invalid_index(self, bundled_levels):
        session = GameSession.from_seed(bundled_levels, seed=0)
        with pytest.raises(ValueError, match="Unknown level index"):
            session.load_level(len(bundled_levels))
        # Nothing changed
        assert session.level_index == 0
        assert session.level.name == "Intro Steps"

    def test_player_uses_movement_config(self, ground_level):
        config = GameConfig()
        config.movement.max_run = 2.0
        session = GameSession.from_seed([ground_level], config=config, seed=0)
        assert session.player.max_run == 2.0


class TestStep:
    def test_falls_onto_ground(self, bundled_levels):
        session = GameSession.from_seed(bundled_levels, seed=0)
        settle(session)
        assert session.player.on_ground
        assert session.player.y == 324 - 26
        assert session.player.vy == 0

    def test_step_result(self, ground_level):
        session = GameSession.from_seed([ground_level], seed=0)
        result = session.step()
        assert isinstance(result, StepResult)
        assert result.frame == 1
        assert not result.hit
        assert result.on_ground == session.player.on_ground

    def test_jump_from_ground(self, ground_level):
        session = GameSession.from_seed([ground_level], seed=0)
        settle(session)
        session.step(jump=True)
        # Jump velocity then one frame of gravity
        assert session.player.vy == pytest.approx(-11.0 + 0.65)
        assert not session.player.on_ground

    def test_jump_in_air_ignored(self, ground_level):
        session = GameSession.from_seed([ground_level], seed=0)
        session.step(jump=True)
        assert session.player.vy == pytest.approx(0.65)

    def test_move_right(self, ground_level):
        session = GameSession.from_seed([ground_level], seed=0)
        settle(session)
        x0 = session.player.x
        for _ in range(20):
            session.step(move=1)
        assert session.player.x > x0
        assert session.player.vx <= session.player.max_run

    def test_spike_hit_respawns(self, ground_level):
        session = GameSession.from_seed(
            [ground_level], config=GameConfig(hazards=HazardConfig(spikes_per_platform=(0, 0))), seed=0,
        )
        settle(session)
        spike = Spike(300, 324, speed=1.0, moving_up=False)
        spike.current_height = 40
        session.level.spikes.append(spike)
        session.player.x, session.player.y = 310, 298

        result = session.step()

        assert result.hit
        assert session.deaths == 1
        assert session.player.position == (80, 180)
        assert session.player.velocity == (0, 0)
        assert not session.player.on_ground

    def test_world_width_clamp(self, ground_level):
        session = GameSession.from_seed([ground_level], seed=0)
        settle(session)
        for _ in range(400):
            session.step(move=1)
        assert session.player.x == session.world_width - session.player.r

    def test_empty_level_free_fall(self):
        session = GameSession.from_seed([{}], seed=0)
        assert session.world_width == 640
        assert session.world_height == 360
        settle(session, 10)
        assert session.player.y > 180
        assert not session.player.on_ground


class TestLevelCycling:
    def test_next_level_wraps(self, bundled_levels):
        session = GameSession.from_seed(bundled_levels, seed=0)
        for expected in list(range(1, len(bundled_levels))) + [0]:
            session.next_level()
            assert session.level_index == expected

    def test_next_level_applies_physics(self, bundled_levels):
        session = GameSession.from_seed(bundled_levels, seed=0)
        session.next_level()
        assert session.player.gravity == 0.35
        assert session.player.jump_v == -8.5
        assert session.world_width == 760

    def test_respawn(self, ground_level):
        session = GameSession.from_seed([ground_level], seed=0)
        settle(session)
        session.step(move=1)
        session.respawn()
        assert session.player.position == (80, 180)
        assert session.player.velocity == (0, 0)


class TestDeterminism:
    def test_same_seed_same_run(self, bundled_levels):
        def run(seed):
            session = GameSession.from_seed(bundled_levels, seed=seed)
            states = []
            for i in range(300):
                session.step(move=1 if i % 50 < 30 else -1, jump=i % 40 == 0)
                states.append(session.get_state())
            return states

        assert run(5) == run(5)

    def test_get_state(self, ground_level):
        session = GameSession.from_seed([ground_level], seed=0)
        state = session.get_state()
        assert state["level_name"] == "Test Ground"
        assert state["player_position"] == (80, 180)
        assert state["deaths"] == 0
        assert state["frame"] == 0
        assert len(state["spikes"]) == len(session.level.spikes)
