"""
Logic module for TicTacToe.
Handles board state, rules, and the move history.
"""

from .game_state import Board, Location, Player, Snapshot
from .move_validator import MoveValidator
from .win_checker import GameStatus, Outcome, WinChecker, evaluate
from .game_session import GameSession, MoveEntry

__version__ = "1.0.0"
