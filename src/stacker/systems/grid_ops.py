from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from esper import World

from stacker.components.grid import Grid
from stacker.components.schedule import Schedule
from stacker.constants import EMPTY, OCCUPIED


@dataclass(slots=True)
class RowCheck:
    can_continue: bool
    cleared: List[int] = field(default_factory=list)
    kept: List[int] = field(default_factory=list)


def create_grid(width: int, height: int) -> List[List[str]]:
    return [[EMPTY for _ in range(width)] for _ in range(height)]


def get_grid(world: World) -> Grid:
    for _, grid in world.get_component(Grid):
        return grid
    raise RuntimeError("Grid not found")


def get_schedule(world: World) -> Schedule:
    for _, schedule in world.get_component(Schedule):
        return schedule
    raise RuntimeError("Schedule not found")


def reset_grid(grid: Grid) -> None:
    grid.cells = create_grid(grid.width, grid.height)
    grid.row = grid.bottom_row


def move_platform(grid: Grid, left_col: int, size: int) -> None:
    """Paint ``size`` cells from ``left_col`` on the active row; clear the rest of it."""
    cells = grid.cells[grid.row]
    right_edge = min(left_col + size, grid.width)
    for col in range(grid.width):
        cells[col] = OCCUPIED if left_col <= col < right_edge else EMPTY


def is_cell_supported(grid: Grid, row: int, col: int) -> bool:
    if row == grid.bottom_row:
        return True
    return grid.cells[row + 1][col] == OCCUPIED


def check_row(grid: Grid, row: int) -> RowCheck:
    """Cut away every occupied cell of ``row`` that has nothing beneath it.

    ``can_continue`` is true when at least one occupied cell survived.
    """
    result = RowCheck(can_continue=False)
    cells = grid.cells[row]
    for col in range(grid.width):
        if cells[col] != OCCUPIED:
            continue
        if is_cell_supported(grid, row, col):
            result.kept.append(col)
            result.can_continue = True
        else:
            cells[col] = EMPTY
            result.cleared.append(col)
    return result


def occupied_columns(grid: Grid, row: int) -> List[int]:
    return [col for col, value in enumerate(grid.cells[row]) if value == OCCUPIED]
