from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Grid:
    """Occupancy model for the stack.

    ``cells[row][col]`` holds ``OCCUPIED`` or ``EMPTY``. Row 0 is the top of the
    machine; play starts on ``height - 1`` and ``row == -1`` means the stack
    reached the top.
    """

    width: int
    height: int
    row: int
    cells: List[List[str]] = field(default_factory=list)

    @property
    def bottom_row(self) -> int:
        return self.height - 1
