"""
Board renderer for TicTacToe.
Draws the board as an image with OpenCV and formats a text grid.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple

from logic.game_state import Board, Player, board_rows
from .config import DisplayConfig


class BoardRenderer:
    """
    Draws TicTacToe boards.

    X is drawn as two crossing lines, O as a circle. Cells on the
    winning line get a highlighted background.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    def render(self, board: Board, winning_line: Sequence[int] = ()) -> np.ndarray:
        """
        Render a board.

        Args:
            board: The board (9 cells).
            winning_line: Cell indices to highlight.

        Returns:
            BGR image of size BOARD_OUTPUT_SIZE x BOARD_OUTPUT_SIZE.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        image = np.full((size, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        # Highlight winning cells first so marks and grid draw on top
        for index in winning_line:
            x1, y1, x2, y2 = self.get_cell_rect(index)
            cv2.rectangle(image, (x1, y1), (x2, y2), self.config.HIGHLIGHT_COLOR, -1)

        self._draw_grid(image)

        for index, cell in enumerate(board):
            if cell is Player.X:
                self._draw_x(image, index)
            elif cell is Player.O:
                self._draw_o(image, index)

        if self.config.SHOW_INDEX_LABELS:
            for index in range(len(board)):
                x1, y1, _, _ = self.get_cell_rect(index)
                cv2.putText(
                    image,
                    str(index),
                    (x1 + 8, y1 + 22),
                    self.config.FONT,
                    0.6,
                    self.config.LABEL_COLOR,
                    2
                )

        return image

    def _draw_grid(self, image: np.ndarray):
        size = self.config.BOARD_OUTPUT_SIZE
        cell_size = self.config.CELL_OUTPUT_SIZE
        color = self.config.GRID_COLOR
        thickness = self.config.GRID_THICKNESS

        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            cv2.line(image, (i * cell_size, 0), (i * cell_size, size), color, thickness)
            # Horizontal lines
            cv2.line(image, (0, i * cell_size), (size, i * cell_size), color, thickness)

        # Draw border
        cv2.rectangle(image, (0, 0), (size - 1, size - 1), color, thickness)

    def _mark_geometry(self, index: int) -> Tuple[int, int, int]:
        """Center and half-size of the mark for a cell."""
        cell_size = self.config.CELL_OUTPUT_SIZE
        x1, y1, _, _ = self.get_cell_rect(index)
        cx = x1 + cell_size // 2
        cy = y1 + cell_size // 2
        margin = int(cell_size * self.config.MARK_MARGIN)
        return cx, cy, cell_size // 2 - margin

    def _draw_x(self, image: np.ndarray, index: int):
        cx, cy, half = self._mark_geometry(index)
        color = self.config.X_COLOR
        thickness = self.config.MARK_THICKNESS
        cv2.line(image, (cx - half, cy - half), (cx + half, cy + half), color, thickness)
        cv2.line(image, (cx + half, cy - half), (cx - half, cy + half), color, thickness)

    def _draw_o(self, image: np.ndarray, index: int):
        cx, cy, half = self._mark_geometry(index)
        cv2.circle(image, (cx, cy), half, self.config.O_COLOR, self.config.MARK_THICKNESS)

    def get_cell_rect(self, index: int) -> Tuple[int, int, int, int]:
        """
        Get the pixel rectangle of a cell.

        Returns:
            (x1, y1, x2, y2) of the cell.
        """
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        x1 = col * cell_size
        y1 = row * cell_size
        return x1, y1, x1 + cell_size - 1, y1 + cell_size - 1

    def cell_at(self, x: int, y: int) -> int:
        """
        Convert a pixel position on the board image into a cell index.

        Args:
            x: Pixel x coordinate.
            y: Pixel y coordinate.

        Returns:
            Cell index (0-8). Points off the board snap to the nearest cell.
        """
        cell_size = self.config.CELL_OUTPUT_SIZE
        last = self.config.BOARD_SIZE - 1

        col = int(x // cell_size)
        row = int(y // cell_size)

        # Clamp to valid range
        row = max(0, min(last, row))
        col = max(0, min(last, col))

        return row * self.config.BOARD_SIZE + col

    def to_rgb(self, image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image to RGB (for Pillow)."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def save(self, board: Board, path: str, winning_line: Sequence[int] = ()) -> bool:
        """
        Render a board and write it to an image file.

        Args:
            board: The board.
            path: Output file path (format from extension, e.g. .png).
            winning_line: Cell indices to highlight.

        Returns:
            True if the file was written.
        """
        image = self.render(board, winning_line)
        return bool(cv2.imwrite(path, image))

    def get_grid_display(self, board: Board) -> str:
        """
        Get a text representation of the board grid.

        Args:
            board: The board.

        Returns:
            String representation of the grid. Empty cells show their index.
        """
        lines = []
        lines.append("┌───┬───┬───┐")

        for row, cells in enumerate(board_rows(board)):
            row_str = "│"
            for col, cell in enumerate(cells):
                if cell is None:
                    index = row * self.config.BOARD_SIZE + col
                    row_str += f" {index} │" if self.config.SHOW_INDEX_LABELS else "   │"
                else:
                    row_str += f" {cell.value} │"
            lines.append(row_str)

            if row < self.config.BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")

        lines.append("└───┴───┴───┘")
        return "\n".join(lines)
