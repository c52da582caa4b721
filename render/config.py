"""
Display configuration for TicTacToe.
All the settings for drawing the board and the game window.
"""

from typing import Optional

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game!
    """

    # ==================== BOARD IMAGE SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size for the rendered board image (pixels)
    BOARD_OUTPUT_SIZE = 480
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 160 pixels per cell

    GRID_THICKNESS = 3
    MARK_THICKNESS = 8

    # Space between a mark and its cell edge, as a fraction of the cell
    MARK_MARGIN = 0.2

    # Colors are BGR (OpenCV order)
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    X_COLOR = (220, 120, 50)     # Blue
    O_COLOR = (50, 50, 220)      # Red
    HIGHLIGHT_COLOR = (170, 255, 170)  # Light green for the winning line
    LABEL_COLOR = (100, 100, 100)

    FONT = cv2.FONT_HERSHEY_SIMPLEX
    SHOW_INDEX_LABELS = True

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_GEOMETRY = "900x600"
    WINDOW_MIN_SIZE = (760, 520)

    UI_BACKGROUND = '#1a1a2e'
    UI_PANEL = '#16213e'
    UI_ACCENT = '#00d4ff'
    UI_STATUS = '#ffd700'
    UI_CURRENT = '#00ff88'
    UI_FONT = ('Segoe UI', 11)
    UI_TITLE_FONT = ('Segoe UI', 16, 'bold')

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def __init__(self, board_size: Optional[int] = None, debug: Optional[bool] = None):
        """
        Initialize the config, optionally overriding the board image size.

        Args:
            board_size: Rendered board size in pixels. Rounded down to a
                multiple of BOARD_SIZE so every pixel belongs to a cell.
            debug: Print extra diagnostics.

        Raises:
            ValueError: If board_size is smaller than BOARD_SIZE.
        """
        if board_size is not None:
            if board_size < self.BOARD_SIZE:
                raise ValueError(
                    f"Board size must be at least {self.BOARD_SIZE} pixels, got {board_size}"
                )
            self.CELL_OUTPUT_SIZE = board_size // self.BOARD_SIZE
            self.BOARD_OUTPUT_SIZE = self.CELL_OUTPUT_SIZE * self.BOARD_SIZE
        if debug is not None:
            self.DEBUG_MODE = debug
