"""Arcade-backed board renderer.

``redraw`` only rebuilds a cached list of cell rectangles from the grid, so it
is cheap enough to run on every platform tick and needs no GL context.
``draw`` paints the cache and must run inside ``Window.on_draw``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from stacker.components.grid import Grid
from stacker.constants import CELL_PADDING, EMPTY_CELL_COLOR, OCCUPIED, OCCUPIED_CELL_COLOR
from stacker.ui.layout import cell_rect, compute_board_geometry


@dataclass(slots=True)
class CellRect:
    row: int
    col: int
    left: float
    bottom: float
    size: float
    color: Tuple[int, int, int]


class GridRenderer:
    def __init__(self, window):
        self.window = window
        self.cells: List[CellRect] = []
        self.redraw_count = 0

    def redraw(self, grid: Grid) -> None:
        cell_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, grid.width, grid.height
        )
        inner = max(1, cell_size - 2 * CELL_PADDING)
        cells: List[CellRect] = []
        for row in range(grid.height):
            for col in range(grid.width):
                left, bottom = cell_rect(row, col, grid.height, cell_size, start_x, start_y)
                color = OCCUPIED_CELL_COLOR if grid.cells[row][col] == OCCUPIED else EMPTY_CELL_COLOR
                cells.append(CellRect(row, col, left + CELL_PADDING, bottom + CELL_PADDING, inner, color))
        self.cells = cells
        self.redraw_count += 1

    def occupied(self) -> List[Tuple[int, int]]:
        return [(c.row, c.col) for c in self.cells if c.color == OCCUPIED_CELL_COLOR]

    def draw(self) -> None:
        import arcade
        for cell in self.cells:
            arcade.draw_lbwh_rectangle_filled(cell.left, cell.bottom, cell.size, cell.size, cell.color)
