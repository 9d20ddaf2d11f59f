import random

import pytest

from flappy_term.data_models import ConfigError, GameConfig, GameSession, Obstacle
from flappy_term.physics_core import advance_obstacles, advance_player, spawn_obstacle_pair

from conftest import StubRng


class TestSpawnObstaclePair:
    def test_gap_and_segments_fill_field(self):
        rng = random.Random(1234)
        for _ in range(500):
            upper, lower = spawn_obstacle_pair(22, 10, 2, rng)
            assert 1 <= upper.height < 8
            assert upper.height + lower.height + 2 == 10

    def test_known_upper_height(self):
        rng = StubRng(4)
        upper, lower = spawn_obstacle_pair(22, 10, 2, rng)
        assert rng.calls == [(1, 8)]
        assert upper == Obstacle(x=22, y=0, width=1, height=4)
        assert lower == Obstacle(x=22, y=6, width=1, height=4)

    def test_pair_spawns_at_right_edge(self):
        upper, lower = spawn_obstacle_pair(30, 12, 3, random.Random(7))
        assert upper.x == lower.x == 30
        assert upper.width == lower.width == 1
        assert lower.y == upper.height + 3

    @pytest.mark.parametrize("height,min_gap", [(3, 2), (5, 5)])
    def test_degenerate_range_is_config_error(self, height, min_gap):
        with pytest.raises(ConfigError):
            spawn_obstacle_pair(22, height, min_gap)


class TestAdvanceObstacles:
    def test_shared_scroll_tick(self, session):
        session.obstacles.extend([Obstacle(3, 0, 1, 4), Obstacle(3, 6, 1, 4)])
        advance_obstacles(session, 0.6)
        assert [o.x for o in session.obstacles] == [2, 2]
        advance_obstacles(session, 0.3)
        assert [o.x for o in session.obstacles] == [2, 2]
        advance_obstacles(session, 0.3)
        assert [o.x for o in session.obstacles] == [1, 1]

    def test_spawns_pair_after_interval(self, session):
        advance_obstacles(session, 2.0, StubRng(3))
        assert session.obstacles == []
        advance_obstacles(session, 1.5, StubRng(3))
        assert session.obstacles == [Obstacle(22, 0, 1, 3), Obstacle(22, 5, 1, 5)]
        assert session.spawn_timer.elapsed == 0.0

    def test_pairs_scroll_in_lockstep(self, session):
        rng = random.Random(99)
        for _ in range(400):
            advance_obstacles(session, 0.1, rng)
            obstacles = session.obstacles
            for upper, lower in zip(obstacles[::2], obstacles[1::2]):
                assert upper.x == lower.x
                assert upper.y == 0

    def test_count_never_exceeds_maximum(self, session):
        rng = random.Random(5)
        for _ in range(2000):
            advance_obstacles(session, 0.05, rng)
            assert len(session.obstacles) <= session.config.max_pipes

    def test_spawn_waits_while_full(self):
        session = GameSession(config=GameConfig(max_pipes=2))
        session.obstacles.extend([Obstacle(10, 0, 1, 4), Obstacle(10, 6, 1, 4)])
        advance_obstacles(session, 3.5, StubRng(4))
        assert len(session.obstacles) == 2
        # The spawn timer keeps its time until there is room
        assert session.spawn_timer.ready

    def test_default_cap_holds_two_pairs(self, session):
        session.obstacles.extend([
            Obstacle(10, 0, 1, 4), Obstacle(10, 6, 1, 4),
            Obstacle(16, 0, 1, 3), Obstacle(16, 5, 1, 5),
        ])
        advance_obstacles(session, 3.1, StubRng(4))
        assert len(session.obstacles) == 4

    def test_offscreen_obstacles_removed_in_order(self, session):
        session.obstacles.extend([
            Obstacle(0, 0, 1, 4), Obstacle(0, 6, 1, 4),
            Obstacle(5, 0, 1, 2), Obstacle(5, 4, 1, 6),
        ])
        advance_obstacles(session, 0.6)
        assert session.obstacles == [Obstacle(4, 0, 1, 2), Obstacle(4, 4, 1, 6)]


class TestAdvancePlayer:
    def test_gravity_is_discrete(self, session):
        advance_player(session, 0.9, jump_requested=False)
        assert session.player.y == 5
        advance_player(session, 0.2, jump_requested=False)
        assert session.player.y == 6
        assert session.gravity_timer.elapsed == 0.0

    def test_jump_respects_cooldown(self, session):
        advance_player(session, 0.3, jump_requested=True)
        assert session.player.y == 4
        advance_player(session, 0.1, jump_requested=True)
        assert session.player.y == 4
        advance_player(session, 0.2, jump_requested=True)
        assert session.player.y == 3

    def test_cooldown_accumulates_without_jump(self, session):
        advance_player(session, 0.3, jump_requested=False)
        advance_player(session, 0.01, jump_requested=True)
        assert session.player.y == 4

    def test_gravity_and_jump_cancel(self, session):
        advance_player(session, 1.1, jump_requested=True)
        assert session.player.y == 5

    def test_no_clamping(self, session):
        session.player.y = 0
        advance_player(session, 0.3, jump_requested=True)
        assert session.player.y == -1
