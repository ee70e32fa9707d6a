"""Per-row platform configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


class ScheduleError(ValueError):
    """Raised when a session is configured with an unusable schedule."""


@dataclass(frozen=True, slots=True)
class RowSpec:
    size: int
    interval_ms: int


@dataclass(slots=True)
class Schedule:
    """Row-indexed (size, interval) table.

    ``rows[r]`` configures grid row ``r``. ``opening`` overrides the bottom
    row for the first platform of a session only.
    """

    rows: List[RowSpec]
    opening: Optional[RowSpec] = None

    @classmethod
    def from_bottom_up(
        cls,
        entries: Iterable[Tuple[int, int]],
        *,
        opening: Tuple[int, int] | None = None,
    ) -> "Schedule":
        rows = [RowSpec(size=int(size), interval_ms=int(interval)) for size, interval in entries]
        rows.reverse()
        opening_spec = RowSpec(size=int(opening[0]), interval_ms=int(opening[1])) if opening else None
        return cls(rows=rows, opening=opening_spec)

    def for_row(self, row: int) -> RowSpec:
        if row < 0 or row >= len(self.rows):
            raise ScheduleError(f"no schedule entry for row {row}")
        return self.rows[row]

    def opening_for(self, row: int) -> RowSpec:
        if self.opening is not None:
            return self.opening
        return self.for_row(row)

    def validate(self, width: int, height: int) -> None:
        """Reject any table that could not drive a full game on a width x height grid."""
        if width < 1 or height < 1:
            raise ScheduleError(f"grid must be at least 1x1, got {width}x{height}")
        if len(self.rows) < height:
            raise ScheduleError(
                f"schedule covers {len(self.rows)} rows but the grid has {height}"
            )
        specs = list(self.rows[:height])
        if self.opening is not None:
            specs.append(self.opening)
        for spec in specs:
            if spec.size < 1 or spec.size > width:
                raise ScheduleError(f"platform size {spec.size} does not fit a grid {width} wide")
            if spec.interval_ms <= 0:
                raise ScheduleError(f"tick interval must be positive, got {spec.interval_ms}")
