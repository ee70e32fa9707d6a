from dataclasses import dataclass
from enum import Enum, auto


class Direction(Enum):
    FORWARD = auto()
    REVERSING = auto()


@dataclass(slots=True)
class Platform:
    """Moving run of cells on the active row; lives only while its timer runs."""

    row: int
    size: int
    position: int = 0
    direction: Direction = Direction.FORWARD
