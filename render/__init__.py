"""
Render module for TicTacToe.
Handles drawing the board for the window, image export and the console.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
