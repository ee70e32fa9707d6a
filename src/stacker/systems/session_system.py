"""Session lifecycle: opening platform, end of game, replay."""
from __future__ import annotations

import logging

from esper import World

from stacker.components.game_state import GameMode
from stacker.events.bus import (
    EVENT_GAME_LOST,
    EVENT_GAME_WON,
    EVENT_GRID_CHANGED,
    EVENT_REPLAY_REQUEST,
    EVENT_SESSION_STARTED,
    EventBus,
)
from stacker.systems.grid_ops import get_grid, get_schedule, reset_grid
from stacker.systems.input import InputSource
from stacker.systems.platform_system import PlatformSystem
from stacker.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class SessionSystem:
    """Single controller for a game session.

    Starts the opening platform, detaches input once the game is decided and
    rebuilds the session when a replay is requested.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        platforms: PlatformSystem,
        input_source: InputSource | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.platforms = platforms
        self.input_source = input_source
        self.sessions_started = 0

        self.event_bus.subscribe(EVENT_GAME_WON, self._on_game_over)
        self.event_bus.subscribe(EVENT_GAME_LOST, self._on_game_over)
        self.event_bus.subscribe(EVENT_REPLAY_REQUEST, self._on_replay_request)

    def start(self) -> None:
        grid = get_grid(self.world)
        spec = get_schedule(self.world).opening_for(grid.row)
        self.platforms.start(grid.row, spec)
        if self.input_source is not None:
            self.input_source.attach()
        self.sessions_started += 1
        logger.info("session %d started on a %dx%d grid", self.sessions_started, grid.width, grid.height)
        self.event_bus.emit(EVENT_SESSION_STARTED, width=grid.width, height=grid.height)
        self.event_bus.emit(EVENT_GRID_CHANGED, reason="session_start")

    def _on_game_over(self, sender, **payload) -> None:
        self.platforms.cancel()
        if self.input_source is not None:
            self.input_source.detach()

    def _on_replay_request(self, sender, **payload) -> None:
        state = get_game_state(self.world)
        if state is None or not state.finished:
            return
        logger.info("replay requested after %s", state.mode.name.lower())
        self.platforms.cancel()
        reset_grid(get_grid(self.world))
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        self.start()
