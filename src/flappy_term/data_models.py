"""
data_models.py: Data structures for the game session.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import (
    WIDTH, HEIGHT, MIN_PIPE_GAP, SPAWN_PIPE_TIME, PIPE_SPEED, MAX_PIPES,
    GRAVITY_TIME, JUMP_TIME, UPDATE_SCORE_TIME
)


class ConfigError(ValueError):
    """Raised when a GameConfig cannot produce a playable field."""


@dataclass
class Obstacle:
    """One rectangular blocking segment. Only x changes after spawn."""
    x: int
    y: int
    width: int
    height: int


@dataclass
class Player:
    """The player occupies a single 1x1 cell."""
    x: int
    y: int


@dataclass
class RateLimitedTrigger:
    """
    Accumulates elapsed time and fires once it exceeds the threshold.
    Firing resets the accumulator to zero.
    """
    threshold: float
    elapsed: float = 0.0

    def accumulate(self, dt: float):
        self.elapsed += dt

    @property
    def ready(self) -> bool:
        return self.elapsed > self.threshold

    def fire(self) -> bool:
        """Resets and returns True if ready, otherwise leaves the timer alone."""
        if not self.ready:
            return False
        self.elapsed = 0.0
        return True

    def update(self, dt: float) -> bool:
        self.accumulate(dt)
        return self.fire()

    def reset(self):
        self.elapsed = 0.0


@dataclass(frozen=True)
class GameConfig:
    """Construction-time parameters of a session. Validated on creation."""
    width: int = WIDTH
    height: int = HEIGHT
    min_gap: int = MIN_PIPE_GAP
    spawn_pipe_time: float = SPAWN_PIPE_TIME
    pipe_speed: float = PIPE_SPEED
    max_pipes: int = MAX_PIPES
    gravity_time: float = GRAVITY_TIME
    jump_time: float = JUMP_TIME
    update_score_time: float = UPDATE_SCORE_TIME

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Field must be non-empty, got {self.width}x{self.height}")
        if self.min_gap <= 0:
            raise ConfigError(f"min_gap must be positive, got {self.min_gap}")
        if self.height - self.min_gap <= 1:
            raise ConfigError(
                f"Gap of {self.min_gap} leaves no room for obstacles in a field "
                f"of height {self.height}")
        if self.pipe_speed <= 0:
            raise ConfigError(f"pipe_speed must be positive, got {self.pipe_speed}")
        if self.max_pipes < 2:
            raise ConfigError(f"max_pipes must fit at least one pair, got {self.max_pipes}")


@dataclass
class GameSession:
    """
    The aggregate root of a running game. Created once per process and reset
    in place on every crash.
    """
    config: GameConfig = field(default_factory=GameConfig)
    high_score: int = 0
    score: int = 0
    obstacles: List[Obstacle] = field(default_factory=list)
    player: Optional[Player] = None

    # Per-behavior timers, built from config in __post_init__
    spawn_timer: RateLimitedTrigger = field(init=False)
    move_timer: RateLimitedTrigger = field(init=False)
    gravity_timer: RateLimitedTrigger = field(init=False)
    jump_timer: RateLimitedTrigger = field(init=False)
    score_timer: RateLimitedTrigger = field(init=False)

    def __post_init__(self):
        cfg = self.config
        if self.player is None:
            self.player = Player(*self.start_position())
        self.spawn_timer = RateLimitedTrigger(cfg.spawn_pipe_time)
        self.move_timer = RateLimitedTrigger(1.0 / cfg.pipe_speed)
        self.gravity_timer = RateLimitedTrigger(cfg.gravity_time)
        self.jump_timer = RateLimitedTrigger(cfg.jump_time)
        self.score_timer = RateLimitedTrigger(cfg.update_score_time)

    def start_position(self) -> Tuple[int, int]:
        return 0, self.config.height // 2

    def reset(self):
        """Crash handling: score to zero, obstacles cleared, player back at start."""
        self.score = 0
        self.obstacles.clear()
        self.player.x, self.player.y = self.start_position()

    def add_point(self):
        self.score += 1
        if self.score > self.high_score:
            self.high_score = self.score
