"""
game_state.py: Menu / Playing / Paused states, key mapping and transitions.
"""

import enum
from dataclasses import dataclass


class GameState(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"


class Key(enum.Enum):
    """Backend-neutral keys the game listens for."""
    ENTER = "enter"
    SPACE = "space"
    UP = "up"
    P = "p"
    ESCAPE = "escape"
    Q = "q"


CONFIRM_KEYS = (Key.ENTER,)
JUMP_KEYS = (Key.SPACE, Key.UP)
PAUSE_KEYS = (Key.P, Key.ESCAPE)
QUIT_KEYS = (Key.Q,)


@dataclass(frozen=True)
class Inputs:
    """Actions requested during one frame."""
    confirm: bool = False
    jump: bool = False
    pause: bool = False
    quit: bool = False


def read_inputs(engine) -> Inputs:
    """Polls the engine once per action."""
    def pressed(keys):
        return any(engine.is_key_pressed(key) for key in keys)

    return Inputs(
        confirm=pressed(CONFIRM_KEYS),
        jump=pressed(JUMP_KEYS),
        pause=pressed(PAUSE_KEYS),
        quit=pressed(QUIT_KEYS),
    )


def transition(state: GameState, inputs: Inputs) -> GameState:
    """
    Returns the state for the next frame. The global quit is not handled
    here; from Paused, quit only drops back to the menu.
    """
    if state is GameState.MENU:
        return GameState.PLAYING if inputs.confirm else state
    if state is GameState.PLAYING:
        return GameState.PAUSED if inputs.pause else state
    if state is GameState.PAUSED:
        if inputs.quit:
            return GameState.MENU
        if inputs.confirm:
            return GameState.PLAYING
        return state
    raise ValueError(f"Unknown game state: {state!r}")
