"""
Game session for TicTacToe.
Owns the move history, the current position in it, and the move list order.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from .game_state import Board, Location, Player, Snapshot, empty_board, place
from .move_validator import MoveValidator
from .win_checker import Outcome, WinChecker


@dataclass(frozen=True)
class MoveEntry:
    """One row of the move list shown to the player."""
    move: int               # Position in history
    label: str              # Text to show
    is_current: bool        # True for the position being viewed


def _initial_history() -> List[Snapshot]:
    return [Snapshot(board=empty_board(), location=None)]


@dataclass
class GameSession:
    """
    A single game with time travel.

    Tracks:
    - History of board snapshots, starting with the empty board
    - Which snapshot is being viewed (current_move)
    - Whether the move list is shown ascending or descending

    Whose turn it is and the game status are worked out from
    current_move and the board on demand, never stored.
    """

    history: List[Snapshot] = field(default_factory=_initial_history)
    current_move: int = 0
    is_ascending: bool = True

    # Print why plays/jumps were ignored
    debug: bool = False

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False)
    validator: Optional[MoveValidator] = field(default=None, repr=False)

    def __post_init__(self):
        if self.validator is None:
            self.validator = MoveValidator(self.win_checker)

    # ==================== DERIVED STATE ====================

    @property
    def current_board(self) -> Board:
        """The board at the current position."""
        return self.history[self.current_move].board

    @property
    def current_player(self) -> Player:
        """X moves on even positions, O on odd ones."""
        return Player.X if self.current_move % 2 == 0 else Player.O

    def outcome(self) -> Outcome:
        """Evaluate the current board."""
        return self.win_checker.evaluate(self.current_board)

    def status(self) -> str:
        """Status line for the current position."""
        outcome = self.outcome()
        if outcome.is_win:
            return f"Winner: {outcome.winner.value}"
        if outcome.is_draw:
            return "Draw! No one wins."
        return f"Next player: {self.current_player.value}"

    def winning_cells(self) -> Tuple[int, ...]:
        """Cells of the winning line, or () if nobody has won."""
        return self.outcome().line

    def move_label(self, move: int) -> str:
        """Label for jumping to a position in history."""
        if move == 0:
            return "Go to game start"
        return f"Go to move #{move} {self.history[move].location}"

    def current_move_label(self) -> str:
        """Label for the position being viewed."""
        location = self.history[self.current_move].location
        if location is None:
            return f"You are at move #{self.current_move}"
        return f"You are at move #{self.current_move} {location}"

    def move_list(self) -> List[MoveEntry]:
        """
        The move list in display order.

        Returns:
            One MoveEntry per snapshot, reversed when sorting descending.
        """
        entries = []
        for move in range(len(self.history)):
            is_current = move == self.current_move
            label = self.current_move_label() if is_current else self.move_label(move)
            entries.append(MoveEntry(move=move, label=label, is_current=is_current))

        if not self.is_ascending:
            entries.reverse()
        return entries

    def sort_label(self) -> str:
        """Text for the sort toggle."""
        return f"Sort: {'Ascending' if self.is_ascending else 'Descending'}"

    # ==================== COMMANDS ====================

    def play_move(self, index: int) -> bool:
        """
        Play the current player's mark at a cell.

        Anything played after the current position is thrown away
        before the new move is recorded.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played, False if it was ignored
            (game already won, cell taken, or index off the board).
        """
        board = self.current_board
        result = self.validator.validate_move(board, index)
        if not result.is_valid:
            if self.debug:
                print(f"[SKIP] {result.error_message}")
            return False

        next_board = place(board, index, self.current_player)
        snapshot = Snapshot(board=next_board, location=Location.from_index(index))

        self.history = self.history[:self.current_move + 1] + [snapshot]
        self.current_move = len(self.history) - 1
        return True

    def jump_to(self, move: int) -> bool:
        """
        View a different position in history.

        History is left alone, so moves after this position are kept
        until the next play_move.

        Args:
            move: Position in history (0 to len(history) - 1).

        Returns:
            True on success, False if move is out of range.
        """
        if not (0 <= move < len(self.history)):
            if self.debug:
                print(f"[SKIP] No move #{move} (history has {len(self.history)} entries)")
            return False

        self.current_move = move
        return True

    def toggle_sort_order(self):
        """Flip the move list between ascending and descending."""
        self.is_ascending = not self.is_ascending
