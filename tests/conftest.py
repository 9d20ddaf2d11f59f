import pytest

from flappy_term.data_models import GameConfig, GameSession
from flappy_term.score_store import ScoreStore


class FakeEngine:
    """Records drawing calls and serves scripted key presses."""

    def __init__(self, frames=None):
        self.pixels = {}
        self.pressed = set()
        self.frames = list(frames or [])
        self.draw_count = 0

    def set_pixel(self, x, y, glyph, color):
        self.pixels[(x, y)] = (glyph, color)

    def clear(self):
        self.pixels.clear()

    def draw(self):
        self.draw_count += 1

    def is_key_pressed(self, key):
        return key in self.pressed

    def wait_frame(self):
        self.pressed = set(self.frames.pop(0)) if self.frames else set()

    def row_text(self, y):
        cells = sorted((x, glyph) for (x, row), (glyph, _) in self.pixels.items() if row == y)
        return "".join(glyph for _, glyph in cells)


class StubRng:
    """Always picks the same upper obstacle height."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def session(config):
    return GameSession(config=config)


@pytest.fixture
def store(tmp_path):
    return ScoreStore(tmp_path / "data.bin")
