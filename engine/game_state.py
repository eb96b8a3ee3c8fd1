"""
Game state for hotseat TicTacToe.
Holds the board, whose turn it is, and the game status.
"""

from enum import Enum
from typing import Optional, List, Tuple, Union
from dataclasses import dataclass


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Mark(Enum):
    """The two marks players place on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


# A board is 9 cells in row-major order; None means empty
Board = Tuple[Optional[Mark], ...]
WinLine = Tuple[int, int, int]


@dataclass(frozen=True)
class InProgress:
    """The game is still being played."""

    @property
    def is_over(self) -> bool:
        return False


@dataclass(frozen=True)
class Won:
    """A player completed a line."""
    mark: Mark
    line: WinLine

    @property
    def is_over(self) -> bool:
        return True


@dataclass(frozen=True)
class Draw:
    """The board is full and nobody completed a line."""

    @property
    def is_over(self) -> bool:
        return True


Status = Union[InProgress, Won, Draw]

IN_PROGRESS = InProgress()
DRAW = Draw()


def empty_board() -> Board:
    """A board with every cell empty."""
    return (None,) * CELL_COUNT


@dataclass(frozen=True)
class GameState:
    """
    The complete state of one game.

    Tracks:
    - The 9 cells of the board (row-major, index = row * 3 + col)
    - The mark that will be placed on the next move
    - Game status (in progress, won, draw)

    Instances are immutable; moves produce a new GameState.
    """

    board: Board = empty_board()
    current_turn: Mark = Mark.X
    status: Status = IN_PROGRESS

    @property
    def is_over(self) -> bool:
        """True once the game is won or drawn."""
        return self.status.is_over

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None."""
        if isinstance(self.status, Won):
            return self.status.mark
        return None

    @property
    def move_count(self) -> int:
        """Number of marks on the board."""
        return sum(1 for cell in self.board if cell is not None)

    def get_empty_cells(self) -> List[int]:
        """Indices of all empty cells."""
        return empty_cells(self.board)


def new_game() -> GameState:
    """Create a fresh game: empty board, X to move, in progress."""
    return GameState(board=empty_board(), current_turn=Mark.X, status=IN_PROGRESS)


def empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to scan.

    Returns:
        List of cell indices (0-8).
    """
    return [index for index, cell in enumerate(board) if cell is None]


def is_board_full(board: Board) -> bool:
    """True if no cell is empty."""
    return all(cell is not None for cell in board)


def format_board(board: Board) -> str:
    """
    Render the board as a small text grid.

    Empty cells show their 1-based number so console players know
    which key to press.
    """
    rows = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            cell = board[index]
            cells.append(str(cell) if cell is not None else str(index + 1))
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
