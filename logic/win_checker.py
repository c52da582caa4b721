"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, Player


class GameStatus(Enum):
    """Where a board stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board."""
    status: GameStatus
    winner: Optional[Player] = None
    line: Tuple[int, ...] = ()

    @property
    def is_win(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAWN


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Works on any 9-cell board, even ones that could never come up
    in a real game. When several lines are complete, the first one
    in WINNING_LINES wins.
    """

    # All possible winning lines (as cell indices), checked in this order
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Args:
            board: The board (9 cells).

        Returns:
            Outcome with status WON (plus winner and line), DRAWN, or IN_PROGRESS.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return Outcome(GameStatus.WON, winner=winner, line=line)

        if all(cell is not None for cell in board):
            return Outcome(GameStatus.DRAWN)

        return Outcome(GameStatus.IN_PROGRESS)

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return self.evaluate(board).winner

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as 3 cell indices, or None.
        """
        outcome = self.evaluate(board)
        return outcome.line if outcome.is_win else None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        return self.evaluate(board).is_draw

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Player if all 3 cells match, None otherwise.
        """
        a, b, c = line
        first = board[a]
        if first is None:
            return None  # Empty cell, no winner on this line

        if first == board[b] == board[c]:
            return first

        return None


# Shared checker - WinChecker holds no state
_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Evaluate a board with the default WinChecker."""
    return _checker.evaluate(board)
