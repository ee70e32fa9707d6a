from typing import Protocol

from stacker.components.grid import Grid


class Renderer(Protocol):
    """Repaints the board from the grid's occupancy.

    ``redraw`` is called by the core after every tick and row advance;
    ``draw`` is called by the host once per frame.
    """

    def redraw(self, grid: Grid) -> None: ...

    def draw(self) -> None: ...
