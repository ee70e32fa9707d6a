from stacker.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    MIN_CELL_SIZE,
    REPLAY_BUTTON,
    TUTORIAL_BUTTON,
)


def compute_board_geometry(window_width: int, window_height: int, cols: int, rows: int):
    """Return (cell_size, start_x, start_y) for a cols x rows board.

    The board is centred horizontally and sits on BOTTOM_MARGIN. Shared by the
    renderer and input hit-testing so both agree on where cells are.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_by_w = max_board_w / cols
    cell_by_h = max_board_h / rows
    cell_size = int(min(cell_by_w, cell_by_h))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    total_width = cols * cell_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return cell_size, start_x, start_y


def cell_rect(row: int, col: int, rows: int, cell_size: int, start_x: float, start_y: float):
    """(left, bottom) of a grid cell; grid row 0 is drawn at the top."""
    left = start_x + col * cell_size
    bottom = start_y + (rows - 1 - row) * cell_size
    return left, bottom


def button_rect(spec, window_width: int, window_height: int):
    """(left, bottom, width, height) of a centred button spec."""
    cx_pct, cy_pct, width, height = spec
    center_x = window_width * cx_pct
    center_y = window_height * cy_pct
    return center_x - width / 2, center_y - height / 2, width, height


def _point_in_rect(x: float, y: float, rect) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height


def point_in_tutorial_button(x: float, y: float, window_width: int, window_height: int) -> bool:
    return _point_in_rect(x, y, button_rect(TUTORIAL_BUTTON, window_width, window_height))


def point_in_replay_button(x: float, y: float, window_width: int, window_height: int) -> bool:
    return _point_in_rect(x, y, button_rect(REPLAY_BUTTON, window_width, window_height))
