"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import Board, CELL_COUNT, get_empty_cells
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not already be won
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Board the move would be played on.
            index: Cell index (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already won by {winner.value}!"
            )

        # Check if index is on the board
        if not (0 <= index < CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{CELL_COUNT - 1}."
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all cells that can be played.

        Returns:
            List of cell indices. Empty once the game is won.
        """
        if self.win_checker.check_winner(board) is not None:
            return []

        return get_empty_cells(board)
