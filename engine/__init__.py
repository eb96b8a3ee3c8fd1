"""
Engine for hotseat TicTacToe.
Handles board state, turns, rules and win/draw detection.
"""

from .game_state import (
    Mark, GameState, InProgress, Won, Draw, Status,
    IN_PROGRESS, DRAW, new_game, empty_cells, is_board_full, format_board,
)
from .win_checker import WIN_LINES, evaluate, get_winning_line
from .move_validator import (
    MoveError, MoveErrorKind, GameOverError, InvalidIndexError, CellOccupiedError,
    ValidationResult, is_valid_index, validate_move, apply_move,
)
from .navigation import Direction, focus_step
from .session import GameSession

__version__ = "1.0.0"
