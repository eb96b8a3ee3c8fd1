"""
Win checker for hotseat TicTacToe.
Decides whether a board is won, drawn, or still in progress.
"""

from typing import Optional, List

import numpy as np

from .game_state import (
    BOARD_SIZE, CELL_COUNT, Board, Mark, WinLine, Status,
    Won, IN_PROGRESS, DRAW, is_board_full,
)


def _build_win_lines() -> List[WinLine]:
    """
    Derive every winning line from the board geometry.

    Order: rows top-to-bottom, columns left-to-right,
    then the main diagonal and the anti-diagonal.
    """
    grid = np.arange(CELL_COUNT).reshape(BOARD_SIZE, BOARD_SIZE)
    lines = []
    lines.extend(grid)            # rows
    lines.extend(grid.T)          # columns
    lines.append(np.diag(grid))
    lines.append(np.diag(np.fliplr(grid)))
    return [tuple(int(index) for index in line) for line in lines]


# All possible winning lines, as triples of cell indices
WIN_LINES = tuple(_build_win_lines())


def check_line(board: Board, line: WinLine) -> Optional[Mark]:
    """
    Check if a single line is complete.

    Args:
        board: The game board.
        line: Three cell indices to check.

    Returns:
        The mark filling all three cells, or None.
    """
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def get_winning_line(board: Board) -> Optional[WinLine]:
    """The first completed line in enumeration order, or None."""
    for line in WIN_LINES:
        if check_line(board, line) is not None:
            return line
    return None


def evaluate(board: Board) -> Status:
    """
    Classify a board.

    If several lines are complete (one move can close two lines at once),
    the first one in WIN_LINES order wins.

    Args:
        board: A 9-cell board.

    Returns:
        Won(mark, line), DRAW, or IN_PROGRESS.

    Raises:
        ValueError: If the board does not have exactly 9 cells.
    """
    if len(board) != CELL_COUNT:
        raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(board)}")

    line = get_winning_line(board)
    if line is not None:
        return Won(mark=board[line[0]], line=line)

    if is_board_full(board):
        return DRAW

    return IN_PROGRESS
