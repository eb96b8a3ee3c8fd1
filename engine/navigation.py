"""
Keyboard focus navigation on the 3x3 grid.
"""

from enum import Enum

from .game_state import BOARD_SIZE
from .move_validator import InvalidIndexError, is_valid_index


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def focus_step(index: int, direction) -> int:
    """
    Move focus one cell in a direction, clamping at the board edges.

    Args:
        index: Currently focused cell (0-8).
        direction: A Direction or its string value.

    Returns:
        The newly focused cell (0-8). Never wraps around.
    """
    if not is_valid_index(index):
        raise InvalidIndexError(f"Invalid cell {index!r}. Must be 0-8.", index)
    direction = Direction(direction)

    row, col = divmod(int(index), BOARD_SIZE)
    last = BOARD_SIZE - 1

    if direction == Direction.UP:
        row = max(0, row - 1)
    elif direction == Direction.DOWN:
        row = min(last, row + 1)
    elif direction == Direction.LEFT:
        col = max(0, col - 1)
    else:
        col = min(last, col + 1)

    return row * BOARD_SIZE + col
