"""Core domain models used by board and unit geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

DEFAULT_ROWS = 12
DEFAULT_COLUMNS = 8
DEFAULT_CELL_SIZE = 50
DEFAULT_INITIAL_BUDGET = 500


class TerrainType(StrEnum):
    """Per-cell terrain."""

    SEA = "SEA"
    ISLAND = "ISLAND"
    NONE = "NONE"


class UnitType(StrEnum):
    """Deployable unit kinds."""

    CARRIER = "CARRIER"
    BATTLESHIP = "BATTLESHIP"
    CRUISER = "CRUISER"
    DESTROYER = "DESTROYER"
    SUBMARINE = "SUBMARINE"
    MINE = "MINE"
    RADAR = "RADAR"
    TURRET = "TURRET"

    @property
    def is_ship(self) -> bool:
        return self in SHIP_TYPES


SHIP_TYPES: frozenset[UnitType] = frozenset(
    {
        UnitType.CARRIER,
        UnitType.BATTLESHIP,
        UnitType.CRUISER,
        UnitType.DESTROYER,
        UnitType.SUBMARINE,
    }
)


class GameState(StrEnum):
    """Match phase supplied by the turn controller."""

    MENU = "MENU"
    SETUP = "SETUP"
    PLAYER_DEPLOY = "PLAYER_DEPLOY"
    COMBAT_PHASE = "COMBAT_PHASE"
    FINISH = "FINISH"


class Angle(IntEnum):
    """Supported unit orientations in degrees."""

    DEG_0 = 0
    DEG_90 = 90
    DEG_180 = 180
    DEG_270 = 270

    @property
    def is_vertical(self) -> bool:
        """Return whether the unit is drawn rotated a quarter turn."""
        return self.value % 180 != 0

    def next(self) -> Angle:
        """Return the orientation one clockwise quarter turn later."""
        return Angle((self.value + 90) % 360)

    @classmethod
    def coerce(cls, value: int | Angle) -> Angle | None:
        """Return the matching angle, or ``None`` for unsupported values."""
        if isinstance(value, Angle):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Position:
    """Board coordinate.

    Values may fall outside the playable rectangle; label cells sit at
    column ``-1``, column ``2 * half_cols`` and row ``rows``.
    """

    row: int
    col: int


@dataclass(slots=True)
class CellInfo:
    """Mutable per-cell state.

    ``occupant`` holds the key of the occupying unit, never the unit itself.
    """

    terrain: TerrainType = TerrainType.SEA
    occupant: int | None = None
    is_checked: bool = False
    is_detected: bool = False
    detect_count: int = 0

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None


Board = dict[Position, CellInfo]


@dataclass(frozen=True, slots=True)
class BoardConfig:
    """Board dimensions and match economy.

    ``columns`` is the width of one player's half; the full board is twice as wide.
    """

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    cell_size: int = DEFAULT_CELL_SIZE
    initial_budget: int = DEFAULT_INITIAL_BUDGET
