"""Placed units and range-indicator cursors."""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from navalchess.game.core.catalog import UnitTemplate
from navalchess.game.core.footprint import footprint
from navalchess.game.core.models import Angle, CellInfo, Position, TerrainType, UnitType

_UNIT_KEYS = itertools.count(1)


def _next_unit_key() -> int:
    return next(_UNIT_KEYS)


@dataclass(frozen=True, slots=True)
class Unit:
    """Immutable unit value.

    ``occupied`` is derived in ``__post_init__`` from the effective size,
    center and angle, so every copy made through ``with_center``,
    ``with_angle`` or ``rotate`` carries a freshly computed footprint.
    An unplaced unit (``center is None``) occupies nothing.
    """

    id: UnitType
    base_width: int
    base_height: int
    image_path: str = ""
    terrain: TerrainType = TerrainType.SEA
    price: int = 0
    angle: Angle = Angle.DEG_0
    center: Position | None = None
    key: int = field(default_factory=_next_unit_key)
    occupied: frozenset[Position] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "angle", Angle(self.angle))
        object.__setattr__(self, "occupied", self._compute_occupied())

    @classmethod
    def from_template(cls, template: UnitTemplate, angle: Angle = Angle.DEG_0) -> Unit:
        """Create an unplaced unit from a catalog template."""
        return cls(
            id=template.id,
            base_width=template.width,
            base_height=template.height,
            image_path=template.unit_image_path or "",
            terrain=template.terrain,
            price=template.price,
            angle=angle,
        )

    @property
    def is_vertical(self) -> bool:
        return self.angle.is_vertical

    @property
    def width(self) -> int:
        """Effective width after rotation."""
        return self.base_height if self.is_vertical else self.base_width

    @property
    def height(self) -> int:
        """Effective height after rotation."""
        return self.base_width if self.is_vertical else self.base_height

    @property
    def is_ship(self) -> bool:
        return self.id.is_ship

    @property
    def is_placed(self) -> bool:
        return self.center is not None

    def with_center(self, center: Position) -> Unit:
        """Return this unit moved to ``center``."""
        return replace(self, center=center)

    def with_angle(self, angle: Angle) -> Unit:
        """Return this unit facing ``angle``."""
        return replace(self, angle=angle)

    def rotate(self) -> Unit:
        """Return this unit turned a quarter clockwise."""
        return replace(self, angle=self.angle.next())

    def is_survive(self, cells: Mapping[Position, CellInfo]) -> bool:
        """Return whether any occupied cell on the board is still unchecked."""
        for position in self.occupied:
            cell = cells.get(position)
            if cell is not None and not cell.is_checked:
                return True
        return False

    def _compute_occupied(self) -> frozenset[Position]:
        if self.center is None:
            return frozenset()
        cells = footprint(self.width, self.height, self.center, self.angle)
        return cells if cells is not None else frozenset()


@dataclass(frozen=True, slots=True)
class Cursor:
    """Targeting cursor describing a square area of effect."""

    id: UnitType
    path: str
    range: int

    @classmethod
    def from_template(cls, template: UnitTemplate) -> Cursor:
        return cls(
            id=template.id,
            path=template.cursor_path or "",
            range=template.cursor_range,
        )

    def range_grid(self, position: Position, angle: int | Angle) -> frozenset[Position] | None:
        """Return the cells covered when aimed at ``position``.

        ``None`` signals an unsupported angle.
        """
        return footprint(self.range, self.range, position, angle)
