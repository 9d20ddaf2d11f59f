"""
physics_core.py: Obstacle spawning and the time-driven movement of obstacles and player.
"""

import logging
import random
from typing import Tuple

from .constants import PIPE_WIDTH
from .data_models import ConfigError, GameSession, Obstacle

logger = logging.getLogger(__name__)


def spawn_obstacle_pair(play_width: int, play_height: int, min_gap: int,
                        rng: random.Random = random) -> Tuple[Obstacle, Obstacle]:
    """
    Creates an upper and lower obstacle at the right edge of the field.
    The two segments plus the gap exactly fill the field height.
    """
    if play_height - min_gap <= 1:
        raise ConfigError(
            f"Cannot spawn obstacles: height {play_height} with gap {min_gap}")

    upper_height = rng.randrange(1, play_height - min_gap)
    lower_height = play_height - upper_height - min_gap

    upper = Obstacle(x=play_width, y=0, width=PIPE_WIDTH, height=upper_height)
    lower = Obstacle(x=play_width, y=upper_height + min_gap,
                     width=PIPE_WIDTH, height=lower_height)
    return upper, lower


def advance_obstacles(session: GameSession, dt: float, rng: random.Random = random):
    """Scrolls, spawns and culls obstacles for one frame."""
    cfg = session.config
    session.spawn_timer.accumulate(dt)

    # One shared tick moves every obstacle, so pairs stay in lockstep
    if session.move_timer.update(dt):
        for obstacle in session.obstacles:
            obstacle.x -= 1

    # The whole pair must fit within max_pipes
    if len(session.obstacles) + 2 <= cfg.max_pipes and session.spawn_timer.fire():
        upper, lower = spawn_obstacle_pair(cfg.width, cfg.height, cfg.min_gap, rng)
        session.obstacles.extend((upper, lower))
        logger.debug("Spawned obstacle pair, gap at rows %d-%d",
                     upper.height, lower.y - 1)

    session.obstacles[:] = [o for o in session.obstacles if o.x + o.width > 0]


def advance_player(session: GameSession, dt: float, jump_requested: bool):
    """
    Applies discrete gravity and the jump input. Both may land in the same
    frame. Bounds are left to collision checks.
    """
    session.jump_timer.accumulate(dt)
    player = session.player

    if session.gravity_timer.update(dt):
        player.y += 1

    if jump_requested and session.jump_timer.fire():
        player.y -= 1
