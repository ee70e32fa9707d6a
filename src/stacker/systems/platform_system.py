"""Timer-driven platform motion."""
from __future__ import annotations

import dataclasses
import logging

from esper import World

from stacker.components.platform import Direction, Platform
from stacker.components.schedule import RowSpec
from stacker.events.bus import (
    EVENT_GRID_CHANGED,
    EVENT_PLATFORM_STARTED,
    EVENT_PLATFORM_STOPPED,
    EVENT_TICK,
    EventBus,
)
from stacker.systems.grid_ops import get_grid, move_platform
from stacker.utils.interval_timer import IntervalTimer

logger = logging.getLogger(__name__)


class TimerStateError(RuntimeError):
    """Raised when a platform would start while another one is still running."""


def tick(state: Platform, width: int) -> Platform:
    """Return the platform one step later; reverses at either edge of the row."""
    limit = width - state.size
    direction = state.direction
    if state.position == limit and direction is Direction.FORWARD:
        direction = Direction.REVERSING
    if state.position == 0 and direction is Direction.REVERSING:
        direction = Direction.FORWARD
    step = -1 if direction is Direction.REVERSING else 1
    position = min(max(state.position + step, 0), max(limit, 0))
    return dataclasses.replace(state, position=position, direction=direction)


class PlatformSystem:
    """Owns the single live platform entity and its IntervalTimer."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.platform_entity: int | None = None
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def running(self) -> bool:
        return self.platform_entity is not None and self.world.entity_exists(self.platform_entity)

    def platform(self) -> Platform | None:
        if not self.running:
            return None
        return self.world.component_for_entity(self.platform_entity, Platform)

    def start(self, row: int, spec: RowSpec) -> int:
        if self.running:
            raise TimerStateError("a platform timer is already running")
        self.platform_entity = self.world.create_entity(
            Platform(row=row, size=spec.size),
            IntervalTimer(interval_ms=spec.interval_ms),
        )
        logger.debug("platform started on row %d (size=%d, interval=%dms)", row, spec.size, spec.interval_ms)
        self.event_bus.emit(
            EVENT_PLATFORM_STARTED,
            row=row,
            size=spec.size,
            interval_ms=spec.interval_ms,
        )
        return self.platform_entity

    def cancel(self) -> None:
        """Clear the timer. Safe to call when nothing is running."""
        if not self.running:
            self.platform_entity = None
            return
        ent = self.platform_entity
        timer = self.world.component_for_entity(ent, IntervalTimer)
        timer.cancel()
        platform = self.world.component_for_entity(ent, Platform)
        self.world.delete_entity(ent, immediate=True)
        self.platform_entity = None
        self.event_bus.emit(EVENT_PLATFORM_STOPPED, row=platform.row, position=platform.position)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt')
        if dt is None or not self.running:
            return
        ent = self.platform_entity
        timer = self.world.component_for_entity(ent, IntervalTimer)
        fired = timer.advance(float(dt))
        for _ in range(fired):
            # A grid_changed listener may cancel the platform mid-frame.
            if not timer.active or not self.running:
                return
            self._step(ent)

    def _step(self, ent: int) -> None:
        grid = get_grid(self.world)
        platform = self.world.component_for_entity(ent, Platform)
        drawn_at = platform.position
        advanced = tick(platform, grid.width)
        move_platform(grid, drawn_at, platform.size)
        platform.position = advanced.position
        platform.direction = advanced.direction
        self.event_bus.emit(EVENT_GRID_CHANGED, reason="tick")
