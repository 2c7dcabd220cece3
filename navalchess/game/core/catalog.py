"""Unit catalog templates and validation helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from navalchess.game.core.models import TerrainType, UnitType

logger = logging.getLogger(__name__)

CATALOG_VERSION = 1


class CatalogError(ValueError):
    """Raised when a catalog entry violates template invariants."""


@dataclass(frozen=True, slots=True)
class UnitTemplate:
    """Immutable catalog entry shared by every unit created from it."""

    id: UnitType
    name: str
    width: int
    height: int
    price: int
    terrain: TerrainType
    ui_image_path: str
    unit_image_path: str
    cursor_path: str | None = None
    cursor_range: int = 0
    description: str | None = None

    @property
    def size_text(self) -> str:
        return f"{self.width}×{self.height}格"

    @property
    def is_ship(self) -> bool:
        return self.id.is_ship


def validate_template(template: UnitTemplate) -> None:
    """Raise ``CatalogError`` if the template cannot produce a valid footprint."""
    if template.width <= 0 or template.height <= 0:
        raise CatalogError(
            f"{template.id.value}: width and height must be positive, "
            f"got {template.width}x{template.height}."
        )
    if template.price < 0:
        raise CatalogError(f"{template.id.value}: price cannot be negative.")
    if template.cursor_range < 0:
        raise CatalogError(f"{template.id.value}: cursor range cannot be negative.")
    if not template.name.strip():
        raise CatalogError(f"{template.id.value}: name is required.")


def _template(
    unit_type: UnitType,
    name: str,
    width: int,
    height: int,
    price: int,
    terrain: TerrainType,
    cursor_range: int,
    description: str,
) -> UnitTemplate:
    slug = unit_type.value.lower()
    return UnitTemplate(
        id=unit_type,
        name=name,
        width=width,
        height=height,
        price=price,
        terrain=terrain,
        ui_image_path=f"images/ui/{slug}.png",
        unit_image_path=f"images/units/{slug}.png",
        cursor_path=f"images/cursors/{slug}.png" if cursor_range > 0 else None,
        cursor_range=cursor_range,
        description=description,
    )


DEFAULT_CATALOG: tuple[UnitTemplate, ...] = (
    _template(UnitType.CARRIER, "Carrier", 1, 5, 150, TerrainType.SEA, 1, "Fleet flagship."),
    _template(UnitType.BATTLESHIP, "Battleship", 1, 4, 120, TerrainType.SEA, 1, "Heavy guns."),
    _template(UnitType.CRUISER, "Cruiser", 1, 3, 90, TerrainType.SEA, 1, "Balanced escort."),
    _template(UnitType.DESTROYER, "Destroyer", 1, 2, 60, TerrainType.SEA, 1, "Fast and cheap."),
    _template(UnitType.SUBMARINE, "Submarine", 1, 3, 80, TerrainType.SEA, 1, "Hidden attacker."),
    _template(UnitType.MINE, "Mine", 1, 1, 20, TerrainType.SEA, 0, "Static trap."),
    _template(UnitType.RADAR, "Radar", 1, 1, 50, TerrainType.ISLAND, 3, "Reveals a 3x3 area."),
    _template(UnitType.TURRET, "Turret", 2, 2, 100, TerrainType.ISLAND, 3, "Shore battery."),
)


def catalog_by_type(
    templates: tuple[UnitTemplate, ...] = DEFAULT_CATALOG,
) -> dict[UnitType, UnitTemplate]:
    """Index templates by unit type, validating each one."""
    indexed: dict[UnitType, UnitTemplate] = {}
    for template in templates:
        validate_template(template)
        if template.id in indexed:
            raise CatalogError(f"Duplicate catalog entry: {template.id.value}.")
        indexed[template.id] = template
    return indexed


def catalog_to_payload(templates: tuple[UnitTemplate, ...]) -> dict[str, object]:
    """Convert templates to a JSON-serializable payload."""
    return {
        "version": CATALOG_VERSION,
        "units": [
            {
                "id": template.id.value,
                "name": template.name,
                "width": template.width,
                "height": template.height,
                "price": template.price,
                "terrain": template.terrain.value,
                "ui_image_path": template.ui_image_path,
                "unit_image_path": template.unit_image_path,
                "cursor_path": template.cursor_path,
                "cursor_range": template.cursor_range,
                "description": template.description,
            }
            for template in templates
        ],
    }


def payload_to_catalog(payload: dict[str, object]) -> tuple[UnitTemplate, ...]:
    """Convert a loaded payload into validated templates."""
    raw_version = payload.get("version", -1)
    if not isinstance(raw_version, (int, str)):
        raise CatalogError("Catalog version must be int-compatible.")
    try:
        version = int(raw_version)
    except ValueError as exc:
        raise CatalogError("Catalog version must be int-compatible.") from exc
    if version != CATALOG_VERSION:
        raise CatalogError("Unsupported catalog version.")

    raw_units = payload.get("units")
    if not isinstance(raw_units, list):
        raise CatalogError("Catalog units must be a list.")

    templates: list[UnitTemplate] = []
    for item in raw_units:
        if not isinstance(item, dict):
            raise CatalogError("Each catalog unit must be an object.")
        try:
            cursor_path = item.get("cursor_path")
            description = item.get("description")
            template = UnitTemplate(
                id=UnitType(str(item["id"]).upper()),
                name=str(item["name"]),
                width=int(item["width"]),
                height=int(item["height"]),
                price=int(item["price"]),
                terrain=TerrainType(str(item["terrain"]).upper()),
                ui_image_path=str(item["ui_image_path"]),
                unit_image_path=str(item.get("unit_image_path") or ""),
                cursor_path=str(cursor_path) if cursor_path is not None else None,
                cursor_range=int(item.get("cursor_range", 0)),
                description=str(description) if description is not None else None,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError("Malformed unit entry in catalog payload.") from exc
        templates.append(template)

    result = tuple(templates)
    catalog_by_type(result)
    return result


def load_catalog(path: Path) -> tuple[UnitTemplate, ...]:
    """Load and validate a JSON catalog file."""
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise CatalogError("Catalog root must be an object.")
    templates = payload_to_catalog(payload)
    logger.debug("catalog_loaded path=%s units=%d", path, len(templates))
    return templates
