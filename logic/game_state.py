"""
Game state types for TicTacToe.
Players, board cells, move locations and history snapshots.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"


# Board is always 3x3
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# A board is 9 cells in row-major order - None means empty
Board = Tuple[Optional[Player], ...]


@dataclass(frozen=True)
class Location:
    """
    Where a move was played.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)

    @classmethod
    def from_index(cls, index: int) -> "Location":
        """Convert a cell index (0-8) into a (row, col) location."""
        return cls(row=index // BOARD_SIZE, col=index % BOARD_SIZE)

    @property
    def index(self) -> int:
        """The cell index for this location."""
        return self.row * BOARD_SIZE + self.col

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class Snapshot:
    """
    The board after a move, plus where that move was played.
    The first snapshot of a game has no location.
    """
    board: Board
    location: Optional[Location] = None


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return (None,) * CELL_COUNT


def place(board: Board, index: int, player: Player) -> Board:
    """
    Return a copy of the board with a mark placed.

    Args:
        board: The board to copy.
        index: Cell index (0-8).
        player: Whose mark goes into the cell.

    Returns:
        The new board. The original is not modified.
    """
    cells = list(board)
    cells[index] = player
    return tuple(cells)


def get_empty_cells(board: Board) -> list:
    """Get the indices of all empty cells."""
    return [index for index, cell in enumerate(board) if cell is None]


def board_rows(board: Board) -> list:
    """Split the board into its 3 rows."""
    return [
        list(board[row * BOARD_SIZE:(row + 1) * BOARD_SIZE])
        for row in range(BOARD_SIZE)
    ]
