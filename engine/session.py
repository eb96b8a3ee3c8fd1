"""
A single game instance with one owner of its current state.
"""

import logging
import threading

from .game_state import GameState, new_game
from .move_validator import apply_move

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the current GameState of one game.

    play() and restart() are the only ways the stored state changes, and
    both run under the session's lock so the check-then-set in apply_move
    happens as one step.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = new_game()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def move_count(self) -> int:
        """Successful moves since the last restart."""
        return self._state.move_count

    def play(self, index: int) -> GameState:
        """
        Apply a move for whoever's turn it is.

        Raises the engine's MoveError subclasses unchanged; on error the
        stored state is not touched.
        """
        with self._lock:
            self._state = apply_move(self._state, index)
            return self._state

    def restart(self) -> GameState:
        """Throw away the current game and start a new one."""
        with self._lock:
            self._state = new_game()
            logger.info("New game started")
            return self._state
