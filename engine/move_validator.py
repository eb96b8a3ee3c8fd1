"""
Move validation and application for hotseat TicTacToe.
"""

import logging
import numbers
from enum import Enum
from typing import Optional
from dataclasses import dataclass, replace

from .game_state import CELL_COUNT, GameState, Won
from .win_checker import evaluate

logger = logging.getLogger(__name__)


class MoveErrorKind(Enum):
    """Why a move was refused."""
    GAME_OVER = "game_over"
    INVALID_INDEX = "invalid_index"
    CELL_OCCUPIED = "cell_occupied"


class MoveError(Exception):
    """
    Base class for refused moves.

    Every move error is recoverable: the state the move was attempted on
    is left exactly as it was.
    """

    kind: MoveErrorKind

    def __init__(self, message: str, index=None):
        super().__init__(message)
        self.index = index


class GameOverError(MoveError):
    kind = MoveErrorKind.GAME_OVER


class InvalidIndexError(MoveError, IndexError):
    kind = MoveErrorKind.INVALID_INDEX


class CellOccupiedError(MoveError):
    kind = MoveErrorKind.CELL_OCCUPIED


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


def is_valid_index(index) -> bool:
    """True for an integer (not a bool) in 0..8, numpy integers included."""
    return (
        isinstance(index, numbers.Integral)
        and not isinstance(index, bool)
        and 0 <= index < CELL_COUNT
    )


def validate_move(state: GameState, index) -> ValidationResult:
    """
    Validate a move without applying it.

    Checks, in order:
    1. The game must not be over
    2. The index must be a cell (0-8)
    3. The cell must be empty

    Args:
        state: Current game state.
        index: Cell to place the current mark in.

    Returns:
        ValidationResult with is_valid and the error that would be raised.
    """
    if state.is_over:
        return ValidationResult(
            is_valid=False,
            error=GameOverError("Game is already over!", index)
        )

    if not is_valid_index(index):
        return ValidationResult(
            is_valid=False,
            error=InvalidIndexError(f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}.", index)
        )

    occupant = state.board[index]
    if occupant is not None:
        return ValidationResult(
            is_valid=False,
            error=CellOccupiedError(f"Cell {index} is already occupied by {occupant}", index)
        )

    return ValidationResult(is_valid=True)


def apply_move(state: GameState, index) -> GameState:
    """
    Place the current mark and return the resulting state.

    The given state is never modified.

    Args:
        state: Current game state.
        index: Cell index (0-8).

    Returns:
        A new GameState with the mark placed, the turn flipped
        and the status re-evaluated.

    Raises:
        GameOverError: The game is already won or drawn.
        InvalidIndexError: The index is not a cell.
        CellOccupiedError: The cell already holds a mark.
    """
    result = validate_move(state, index)
    if not result.is_valid:
        raise result.error

    index = int(index)
    board = list(state.board)
    board[index] = state.current_turn
    board = tuple(board)

    new_state = replace(
        state,
        board=board,
        current_turn=state.current_turn.opposite(),
        status=evaluate(board),
    )

    logger.debug("%s placed at %d", state.current_turn, index)
    if isinstance(new_state.status, Won):
        logger.info("%s wins on line %s", new_state.status.mark, new_state.status.line)
    elif new_state.is_over:
        logger.info("Game drawn")

    return new_state
