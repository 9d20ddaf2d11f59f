"""
flappy_client.py

The frame loop: state dispatch, physics, collisions, rendering and
high score persistence. The display/input backend is passed in, so any
object with the ConsoleEngine interface can drive the game.
"""

import logging
import random
import time
from typing import Optional

from .collision import handle_collisions
from .constants import GOLD, GREEN, PIPE_CHAR, PLAYER_CHAR, RED, WHITE
from .data_models import GameConfig, GameSession, Obstacle
from .game_state import GameState, read_inputs, transition
from .physics_core import advance_obstacles, advance_player
from .score_store import ScoreStore

logger = logging.getLogger(__name__)


# ----------------- Drawing helpers -----------------

def draw_text_centered(engine, text: str, y: int, color, width: int):
    start_x = (width - len(text)) // 2
    for i, c in enumerate(text):
        engine.set_pixel(start_x + i, y, c, color)


def draw_obstacle(engine, obstacle: Obstacle):
    for i in range(obstacle.width):
        for j in range(obstacle.height):
            engine.set_pixel(obstacle.x + i, obstacle.y + j, PIPE_CHAR, GREEN)


def draw_menu(engine, high_score: int, width: int):
    draw_text_centered(engine, "Flappy Bird", 2, WHITE, width)
    draw_text_centered(engine, "Press Enter to start", 4, WHITE, width)
    draw_text_centered(engine, "Press Q to quit", 6, WHITE, width)
    draw_text_centered(engine, f"High Score: {high_score}", 8, GOLD, width)


def draw_pause(engine, high_score: int, width: int):
    draw_text_centered(engine, "Paused", 2, WHITE, width)
    draw_text_centered(engine, f"High Score: {high_score}", 4, GOLD, width)
    draw_text_centered(engine, "Press Enter to resume", 6, WHITE, width)
    draw_text_centered(engine, "Press Q to quit", 8, WHITE, width)


def draw_session(engine, session: GameSession):
    for obstacle in session.obstacles:
        draw_obstacle(engine, obstacle)
    engine.set_pixel(session.player.x, session.player.y, PLAYER_CHAR, RED)
    draw_text_centered(engine, str(session.score), 0, WHITE, session.config.width)


# ----------------- Game Client -----------------

class FlappyClient:
    def __init__(self, engine, store: ScoreStore, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self.engine = engine
        self.store = store
        self.rng = rng or random.Random()

        # Session owns all mutable game data for the life of the process
        self.session = GameSession(config=config or GameConfig(), high_score=store.load())
        self.state = GameState.MENU
        logger.info("Game started, high score %d", self.session.high_score)

    def step(self, dt: float) -> bool:
        """Runs one frame. Returns False once the player asked to quit."""
        engine = self.engine
        session = self.session
        width = session.config.width

        engine.clear()
        inputs = read_inputs(engine)

        if self.state is GameState.MENU:
            draw_menu(engine, session.high_score, width)
        elif self.state is GameState.PLAYING:
            handle_collisions(session, dt)
            advance_obstacles(session, dt, self.rng)
            advance_player(session, dt, inputs.jump)
            draw_session(engine, session)
        elif self.state is GameState.PAUSED:
            draw_pause(engine, session.high_score, width)

        previous = self.state
        self.state = transition(self.state, inputs)
        if self.state is not previous:
            logger.info("State %s -> %s", previous.value, self.state.value)

        # Saved every paused frame; the store skips unchanged values
        if previous is GameState.PAUSED:
            self.commit_high_score()

        if inputs.quit:
            return False

        engine.draw()
        return True

    def commit_high_score(self) -> bool:
        session = self.session
        if session.score > session.high_score:
            session.high_score = session.score
        return self.store.save(session.high_score)

    def run(self):
        """The main execution loop, paced by the engine's frame clock."""
        last_frame_time = time.perf_counter()
        running = True
        try:
            while running:
                now = time.perf_counter()
                dt = now - last_frame_time
                self.engine.wait_frame()
                running = self.step(dt)
                last_frame_time = now
        finally:
            self.commit_high_score()
            logger.info("Exiting, high score %d", self.session.high_score)
