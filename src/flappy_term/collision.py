"""
collision.py: Bounding-box collision, screen bounds and gap-crossing scoring.
"""

import enum
import logging
from typing import Iterable

from .data_models import GameSession, Obstacle, Player

logger = logging.getLogger(__name__)


class CollisionResult(enum.Enum):
    NONE = "none"
    CRASHED = "crashed"
    SCORED = "scored"


def overlaps(first_x: int, first_y: int, first_width: int, first_height: int,
             second_x: int, second_y: int, second_width: int, second_height: int) -> bool:
    return (first_x < second_x + second_width
            and first_x + first_width > second_x
            and first_y < second_y + second_height
            and first_y + first_height > second_y)


def collides_with_obstacles(player: Player, obstacles: Iterable[Obstacle]) -> bool:
    return any(
        overlaps(player.x, player.y, 1, 1, o.x, o.y, o.width, o.height)
        for o in obstacles
    )


def collides_with_screen(player: Player, width: int, height: int) -> bool:
    return not (0 <= player.x < width and 0 <= player.y < height)


def crossing_gap(player: Player, obstacles: Iterable[Obstacle], min_gap: int) -> bool:
    """
    True when the player is level with an obstacle's x and inside the gap
    next to its exposed edge. The row exactly at the edge does not count.
    """
    for o in obstacles:
        if player.x != o.x:
            continue
        bottom = o.y + o.height
        if (o.y + min_gap < player.y < bottom) or (bottom < player.y < bottom + min_gap):
            return True
    return False


def handle_collisions(session: GameSession, dt: float) -> CollisionResult:
    """Resets the session on a crash, or awards a point for a gap crossing."""
    cfg = session.config
    player = session.player
    session.score_timer.accumulate(dt)

    crashed = False
    if collides_with_obstacles(player, session.obstacles):
        crashed = True
        session.reset()
    if collides_with_screen(player, cfg.width, cfg.height):
        crashed = True
        session.reset()

    if crashed:
        logger.info("Crashed, score reset (high score %d)", session.high_score)
        return CollisionResult.CRASHED

    if crossing_gap(player, session.obstacles, cfg.min_gap) and session.score_timer.fire():
        session.add_point()
        logger.debug("Scored, score is now %d", session.score)
        return CollisionResult.SCORED

    return CollisionResult.NONE
