from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class IntervalTimer:
    """Fixed-period timer fed by frame deltas.

    Frames rarely land on period boundaries, so elapsed time accumulates and
    ``advance`` reports how many whole periods completed. A timer whose
    entity is deleted simply stops being advanced; ``cancel`` additionally
    makes any pending periods in the current frame a no-op.
    """

    interval_ms: int
    active: bool = True
    _elapsed_ms: float = field(init=False, default=0.0, repr=False)

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {self.interval_ms}")

    def advance(self, dt: float) -> int:
        """Add ``dt`` seconds and return the number of periods that elapsed."""
        if not self.active or dt <= 0:
            return 0
        self._elapsed_ms += dt * 1000.0
        fired = int(self._elapsed_ms // self.interval_ms)
        if fired:
            self._elapsed_ms -= fired * self.interval_ms
        return fired

    def cancel(self) -> None:
        self.active = False
        self._elapsed_ms = 0.0

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms
