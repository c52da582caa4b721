"""
Tests for the board renderer.

Usage:
    pytest test_render.py -v
"""

import cv2
import numpy as np
import pytest

from logic.game_state import Player, empty_board, place
from render import BoardRenderer, DisplayConfig


def sample_board():
    board = empty_board()
    board = place(board, 0, Player.X)
    board = place(board, 4, Player.O)
    return board


def pixel(image, x, y):
    return tuple(int(v) for v in image[y, x])


def test_render_size_and_type():
    renderer = BoardRenderer()
    image = renderer.render(empty_board())

    size = DisplayConfig.BOARD_OUTPUT_SIZE
    assert image.shape == (size, size, 3)
    assert image.dtype == np.uint8


def test_custom_board_size():
    config = DisplayConfig(board_size=300)
    assert config.CELL_OUTPUT_SIZE == 100
    # Class defaults stay untouched
    assert DisplayConfig.BOARD_OUTPUT_SIZE == 480

    image = BoardRenderer(config).render(empty_board())
    assert image.shape == (300, 300, 3)


def test_board_size_rounds_down_to_whole_cells():
    config = DisplayConfig(board_size=500)
    assert config.CELL_OUTPUT_SIZE == 166
    assert config.BOARD_OUTPUT_SIZE == 498

    renderer = BoardRenderer(config)
    assert renderer.render(empty_board()).shape == (498, 498, 3)
    assert renderer.cell_at(497, 497) == 8


@pytest.mark.parametrize("size", [-5, 0, 2])
def test_board_size_too_small_is_rejected(size):
    with pytest.raises(ValueError):
        DisplayConfig(board_size=size)


def test_marks_are_drawn_in_their_colors():
    config = DisplayConfig()
    renderer = BoardRenderer(config)
    image = renderer.render(sample_board())
    cell = config.CELL_OUTPUT_SIZE

    # X lines cross in the middle of cell 0
    assert pixel(image, cell // 2, cell // 2) == config.X_COLOR

    # O is a hollow circle in cell 4
    cx = cell + cell // 2
    cy = cell + cell // 2
    radius = cell // 2 - int(cell * config.MARK_MARGIN)
    assert pixel(image, cx, cy) == config.BACKGROUND_COLOR
    assert pixel(image, cx + radius, cy) == config.O_COLOR


def test_winning_cells_are_highlighted():
    config = DisplayConfig()
    renderer = BoardRenderer(config)
    board = empty_board()
    for index in (0, 1, 2):
        board = place(board, index, Player.X)

    image = renderer.render(board, winning_line=(0, 1, 2))

    for index in range(9):
        _, _, x2, y2 = renderer.get_cell_rect(index)
        expected = config.HIGHLIGHT_COLOR if index in (0, 1, 2) else config.BACKGROUND_COLOR
        assert pixel(image, x2 - 6, y2 - 6) == expected


def test_cell_at_maps_pixels_to_cells():
    renderer = BoardRenderer()
    assert renderer.cell_at(0, 0) == 0
    assert renderer.cell_at(240, 10) == 1
    assert renderer.cell_at(479, 479) == 8
    assert renderer.cell_at(10, 250) == 3

    # Clamp to valid range
    assert renderer.cell_at(-5, 1000) == 6
    assert renderer.cell_at(2000, -1) == 2


def test_cell_rect_round_trips_with_cell_at():
    renderer = BoardRenderer()
    for index in range(9):
        x1, y1, x2, y2 = renderer.get_cell_rect(index)
        assert renderer.cell_at(x1, y1) == index
        assert renderer.cell_at(x2, y2) == index


def test_to_rgb_swaps_channels():
    renderer = BoardRenderer()
    image = np.zeros((2, 2, 3), dtype=np.uint8)
    image[:, :] = (255, 0, 10)
    assert tuple(renderer.to_rgb(image)[0, 0]) == (10, 0, 255)


def test_save_writes_png(tmp_path):
    renderer = BoardRenderer()
    path = tmp_path / "board.png"

    assert renderer.save(sample_board(), str(path), winning_line=())
    loaded = cv2.imread(str(path))
    assert loaded is not None
    assert loaded.shape == (480, 480, 3)


def test_grid_display():
    renderer = BoardRenderer()
    text = renderer.get_grid_display(sample_board())
    lines = text.splitlines()

    assert len(lines) == 7
    assert lines[0] == "┌───┬───┬───┐"
    assert lines[1] == "│ X │ 1 │ 2 │"
    assert lines[3] == "│ 3 │ O │ 5 │"
    assert lines[5] == "│ 6 │ 7 │ 8 │"
    assert lines[6] == "└───┴───┴───┘"
