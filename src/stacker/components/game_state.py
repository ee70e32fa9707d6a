"""Game state resource describing the session outcome."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameState:
    """Singleton component storing the current game mode."""
    mode: GameMode = GameMode.PLAYING

    @property
    def finished(self) -> bool:
        return self.mode in (GameMode.WON, GameMode.LOST)
