"""
Input controller for hotseat TicTacToe.
Turns clicks and key presses into engine moves and reports the result
through render/announce callbacks.
"""

import logging
from typing import Callable, Optional

from engine import (
    GameSession, GameState, Won, Draw, Direction,
    MoveError, GameOverError, CellOccupiedError, InvalidIndexError,
    is_valid_index,
    focus_step,
)
from .config import ControllerConfig

logger = logging.getLogger(__name__)


class InputController:
    """
    Glue between a display surface and the game engine.

    The display provides callbacks:
    - render(state): draw the whole board; called whenever the state changes
    - announce(message): show/speak a short message
    - focus(index): move the focus highlight (optional)
    - status(text): set the persistent status line (optional)

    The controller never draws anything itself.
    """

    def __init__(
        self,
        render: Callable[[GameState], None],
        announce: Callable[[str], None],
        focus: Optional[Callable[[int], None]] = None,
        status: Optional[Callable[[str], None]] = None,
        config: Optional[ControllerConfig] = None,
        session: Optional[GameSession] = None,
    ):
        self._render = render
        self._announce = announce
        self._focus = focus
        self._status = status
        self.config = config or ControllerConfig()
        self.session = session or GameSession()
        self.focused_index = 0

        self._directions = {}
        for direction, keys in (
            (Direction.UP, self.config.KEYS_UP),
            (Direction.DOWN, self.config.KEYS_DOWN),
            (Direction.LEFT, self.config.KEYS_LEFT),
            (Direction.RIGHT, self.config.KEYS_RIGHT),
        ):
            for key in keys:
                self._directions[key] = direction

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def winning_line(self):
        """The completed line when the game is won, else None."""
        if isinstance(self.state.status, Won):
            return self.state.status.line
        return None

    def status_text(self, state: Optional[GameState] = None) -> str:
        """Human-readable summary of a state's status."""
        state = state or self.state
        if isinstance(state.status, Won):
            return self.config.MSG_WIN.format(mark=state.status.mark)
        if isinstance(state.status, Draw):
            return self.config.MSG_DRAW
        return self.config.MSG_TURN.format(mark=state.current_turn)

    # ==================== COMMANDS ====================

    def start(self):
        """Begin the first game."""
        self.restart()

    def restart(self):
        """Start a new game. Allowed at any time, even mid-game."""
        state = self.session.restart()
        self.set_focus(0)
        self._announce(self.config.MSG_NEW_GAME.format(mark=state.current_turn))
        self._refresh(state)

    def click(self, index: int):
        """A cell was clicked."""
        if self.state.is_over:
            return
        # Focus only ever points at a real cell
        if is_valid_index(index):
            self.set_focus(index)
        self.attempt_move(index)

    def handle_key(self, key: str) -> bool:
        """
        Handle a key press (Tk keysym).

        Returns:
            True if the key was one the controller uses.
        """
        direction = self._directions.get(key)
        if direction is not None:
            self.set_focus(focus_step(self.focused_index, direction))
            return True

        if key in self.config.KEYS_PLACE:
            if self.state.is_over:
                self._announce(self.config.MSG_GAME_OVER)
            else:
                self.attempt_move(self.focused_index)
            return True

        return False

    def set_focus(self, index: int):
        self.focused_index = index
        if self._focus is not None:
            self._focus(index)

    def attempt_move(self, index: int) -> bool:
        """
        Try to place the current mark at a cell.

        Returns:
            True if the move was made.
        """
        try:
            state = self.session.play(index)
        except MoveError as e:
            logger.info("Move at %r refused: %s", index, e)
            self._announce(self._error_message(e))
            return False

        self._announce(self.config.MSG_MOVE_PLACED.format(mark=state.current_turn))
        self._refresh(state)

        if state.is_over:
            self._announce(self.status_text(state))

        return True

    # ==================== HELPERS ====================

    def _error_message(self, error: MoveError) -> str:
        if isinstance(error, CellOccupiedError):
            return self.config.MSG_CELL_TAKEN
        if isinstance(error, GameOverError):
            return self.config.MSG_GAME_OVER
        if isinstance(error, InvalidIndexError):
            return self.config.MSG_INVALID_CELL
        return str(error)

    def _refresh(self, state: GameState):
        if self._status is not None:
            self._status(self.status_text(state))
        self._render(state)
