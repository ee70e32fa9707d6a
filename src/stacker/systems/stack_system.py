"""Stop-trigger handling: drop the platform, cut overhangs, advance or end."""
from __future__ import annotations

import logging

from esper import World

from stacker.components.game_state import GameMode
from stacker.events.bus import (
    EVENT_GAME_LOST,
    EVENT_GAME_WON,
    EVENT_GRID_CHANGED,
    EVENT_ROW_ADVANCED,
    EVENT_STOP_TRIGGER,
    EventBus,
)
from stacker.systems.grid_ops import check_row, get_grid, get_schedule
from stacker.systems.platform_system import PlatformSystem
from stacker.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class StackSystem:
    """Resolves each stop trigger against the row beneath the dropped platform.

    The active row index is decremented *before* the vacated row is checked,
    so ``check_row`` always runs on ``grid.row + 1``. The vacated row is
    validated against the row beneath it; the new active row is never read.
    """

    def __init__(self, world: World, event_bus: EventBus, platforms: PlatformSystem):
        self.world = world
        self.event_bus = event_bus
        self.platforms = platforms
        self._resolving = False
        self.event_bus.subscribe(EVENT_STOP_TRIGGER, self.on_stop_trigger)

    def on_stop_trigger(self, sender, **kwargs):
        state = get_game_state(self.world)
        if state is None or state.mode != GameMode.PLAYING:
            return
        if self._resolving:
            logger.debug("stop trigger ignored: row advance already in progress")
            return
        self._resolving = True
        try:
            self._advance()
        finally:
            self._resolving = False

    def _advance(self) -> None:
        grid = get_grid(self.world)
        self.platforms.cancel()
        grid.row -= 1
        placed_row = grid.row + 1
        result = check_row(grid, placed_row)
        logger.debug(
            "row %d placed: kept=%s cleared=%s", placed_row, result.kept, result.cleared
        )
        if not result.can_continue:
            set_game_mode(self.world, self.event_bus, GameMode.LOST)
            logger.info("game lost on row %d", placed_row)
            self._emit_row_advanced(placed_row, grid.row, result)
            self.event_bus.emit(EVENT_GAME_LOST, row=placed_row)
            return
        if grid.row == -1:
            set_game_mode(self.world, self.event_bus, GameMode.WON)
            logger.info("game won")
            self._emit_row_advanced(placed_row, grid.row, result)
            self.event_bus.emit(EVENT_GAME_WON)
            return
        spec = get_schedule(self.world).for_row(grid.row)
        self.platforms.start(grid.row, spec)
        self._emit_row_advanced(placed_row, grid.row, result)

    def _emit_row_advanced(self, placed_row: int, row: int, result) -> None:
        self.event_bus.emit(
            EVENT_ROW_ADVANCED,
            placed_row=placed_row,
            row=row,
            cleared=list(result.cleared),
            kept=list(result.kept),
        )
        self.event_bus.emit(EVENT_GRID_CHANGED, reason="row_advance")
