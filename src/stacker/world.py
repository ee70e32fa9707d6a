from __future__ import annotations

from esper import World

from stacker.components.game_state import GameMode, GameState
from stacker.components.grid import Grid
from stacker.components.notification import Notification
from stacker.components.schedule import Schedule
from stacker.components.tutorial import TutorialState
from stacker.constants import DEFAULT_SCHEDULE, GRID_COLS, GRID_ROWS, OPENING_ROW
from stacker.systems.grid_ops import create_grid


def default_schedule() -> Schedule:
    return Schedule.from_bottom_up(DEFAULT_SCHEDULE, opening=OPENING_ROW)


def create_world(
    *,
    width: int = GRID_COLS,
    height: int = GRID_ROWS,
    schedule: Schedule | None = None,
) -> World:
    """Build a fresh session world; raises ScheduleError for unusable configuration."""
    schedule = schedule or default_schedule()
    schedule.validate(width, height)

    world = World()
    world.create_entity(GameState(mode=GameMode.PLAYING))
    world.create_entity(
        Grid(width=width, height=height, row=height - 1, cells=create_grid(width, height)),
        schedule,
    )
    world.create_entity(Notification())
    world.create_entity(TutorialState())
    return world
