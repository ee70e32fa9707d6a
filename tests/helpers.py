from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from esper import World

from stacker.components.grid import Grid
from stacker.components.schedule import Schedule
from stacker.constants import OCCUPIED
from stacker.events.bus import EVENT_TICK, EventBus
from stacker.systems.grid_ops import get_grid
from stacker.systems.input import InputSystem
from stacker.systems.notification_system import NotificationSystem
from stacker.systems.platform_system import PlatformSystem
from stacker.systems.session_system import SessionSystem
from stacker.systems.stack_system import StackSystem
from stacker.world import create_world

INTERVAL_MS = 100


class DummyWindow:
    def __init__(self, width=480, height=720):
        self.width = width
        self.height = height


class RecordingRenderer:
    def __init__(self):
        self.redraws: List[List[List[str]]] = []
        self.draw_calls = 0

    def redraw(self, grid: Grid) -> None:
        self.redraws.append([list(row) for row in grid.cells])

    def draw(self) -> None:
        self.draw_calls += 1


@dataclass
class Session:
    bus: EventBus
    world: World
    platforms: PlatformSystem
    stack: StackSystem
    session: SessionSystem
    input: InputSystem
    events: List[Tuple[str, dict]] = field(default_factory=list)

    @property
    def grid(self) -> Grid:
        return get_grid(self.world)

    def record(self, *names: str) -> None:
        for name in names:
            self.bus.subscribe(name, _recorder(self.events, name))

    def count(self, name: str) -> int:
        return sum(1 for event_name, _ in self.events if event_name == name)


def _recorder(sink: List[Tuple[str, dict]], name: str):
    def handler(sender, **payload: Any) -> None:
        sink.append((name, payload))
    return handler


def uniform_schedule(height: int, size: int = 3, interval_ms: int = INTERVAL_MS) -> Schedule:
    return Schedule.from_bottom_up([(size, interval_ms)] * height)


def build_session(
    width: int = 7,
    height: int = 4,
    *,
    schedule: Schedule | None = None,
    start: bool = True,
) -> Session:
    bus = EventBus()
    world = create_world(width=width, height=height, schedule=schedule or uniform_schedule(height))
    platforms = PlatformSystem(world, bus)
    stack = StackSystem(world, bus, platforms)
    input_system = InputSystem(bus, DummyWindow())
    session = SessionSystem(world, bus, platforms, input_source=input_system)
    NotificationSystem(world, bus)
    built = Session(bus, world, platforms, stack, session, input_system)
    if start:
        session.start()
    return built


def run_ticks(bus: EventBus, count: int, interval_ms: int = INTERVAL_MS) -> None:
    """Emit ``count`` frames of exactly one period each."""
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=interval_ms / 1000.0 + 1e-9)


def fill_row(grid: Grid, row: int, cols: Iterable[int]) -> None:
    for col in cols:
        grid.cells[row][col] = OCCUPIED
