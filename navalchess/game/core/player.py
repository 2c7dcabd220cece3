"""Player records and fleet budgeting."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from navalchess.game.core.catalog import UnitTemplate
from navalchess.game.core.models import CellInfo, Position
from navalchess.game.core.units import Unit

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Player:
    """Match participant owning an ordered list of units."""

    name: str
    budget: int
    units: list[Unit] = field(default_factory=list)

    def __setattr__(self, key: str, value: object) -> None:
        if key == "name" and hasattr(self, "name"):
            raise AttributeError("Player name is read-only.")
        object.__setattr__(self, key, value)

    @classmethod
    def create(cls, name: str, budget: int) -> Player:
        return cls(name=name, budget=budget)

    def can_afford(self, template: UnitTemplate) -> bool:
        """Return whether the remaining budget covers the template price."""
        return template.price <= self.budget

    def purchase(self, unit: Unit) -> None:
        """Add a unit to the fleet and pay for it."""
        if unit.price > self.budget:
            raise ValueError(
                f"{self.name} cannot afford {unit.id.value}: price {unit.price}, budget {self.budget}."
            )
        self.budget -= unit.price
        self.units.append(unit)
        logger.debug(
            "unit_purchased player=%s unit=%s key=%d budget=%d",
            self.name,
            unit.id.value,
            unit.key,
            self.budget,
        )

    def replace_unit(self, updated: Unit) -> None:
        """Swap in a moved or rotated copy of an owned unit."""
        for index, unit in enumerate(self.units):
            if unit.key == updated.key:
                self.units[index] = updated
                return
        raise ValueError(f"{self.name} does not own unit {updated.key}.")

    def surviving_units(self, cells: Mapping[Position, CellInfo]) -> list[Unit]:
        """Return owned units with at least one unchecked cell."""
        return [unit for unit in self.units if unit.is_survive(cells)]
