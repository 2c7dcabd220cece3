"""Pixel projection of units and cursors as absolute-positioning styles."""

from __future__ import annotations

from dataclasses import dataclass

from navalchess.game.core.models import DEFAULT_CELL_SIZE, Angle, GameState, Position
from navalchess.game.core.units import Cursor, Unit

LABELLED_STATES: frozenset[GameState] = frozenset({GameState.COMBAT_PHASE, GameState.FINISH})


@dataclass(frozen=True, slots=True)
class StyleDescriptor:
    """Rectangle in board pixels with a rotated background image."""

    top: int
    left: int
    width: int
    height: int
    image_path: str
    angle: Angle

    def to_css(self) -> str:
        """Render the descriptor as an inline CSS declaration list."""
        return (
            "position: absolute;"
            f"top: {self.top}px;"
            f"left: {self.left}px;"
            f"width: {self.width}px;"
            f"height: {self.height}px;"
            f"background-image: url('{self.image_path}');"
            "background-size: 100%;"
            f"transform: rotate({self.angle.value}deg);"
            "transform-origin: top left;"
            "pointer-events: none;"
        )


def _half(value: int) -> int:
    """Halve toward zero."""
    return -(-value // 2) if value < 0 else value // 2


def anchor_offset(width: int, height: int, angle: int | Angle) -> tuple[int, int] | None:
    """Return the ``(offset_x, offset_y)`` in cells for the rotated image's top-left corner."""
    resolved = Angle.coerce(angle)
    if resolved is Angle.DEG_0:
        return -_half(width - 1), -_half(height - 1)
    if resolved is Angle.DEG_90:
        return 1, -_half(height - 1)
    if resolved is Angle.DEG_180:
        return (width + 1) // 2, (height + 1) // 2
    if resolved is Angle.DEG_270:
        return 0, (height + 1) // 2
    return None


def label_offset(state: GameState) -> int:
    """Return the column shift added by the left label gutter."""
    return 1 if state in LABELLED_STATES else 0


def unit_style(
    unit: Unit, state: GameState, cell_size: int = DEFAULT_CELL_SIZE
) -> StyleDescriptor | None:
    """Project a placed unit; ``None`` when it has no center."""
    if unit.center is None:
        return None
    offset = anchor_offset(unit.width, unit.height, unit.angle)
    if offset is None:
        return None
    offset_x, offset_y = offset
    row = unit.center.row + offset_y
    col = unit.center.col + offset_x + label_offset(state)
    return StyleDescriptor(
        top=row * cell_size,
        left=col * cell_size,
        width=unit.base_width * cell_size,
        height=unit.base_height * cell_size,
        image_path=unit.image_path,
        angle=unit.angle,
    )


def cursor_style(
    cursor: Cursor, position: Position, angle: int | Angle, cell_size: int = DEFAULT_CELL_SIZE
) -> StyleDescriptor | None:
    """Project a cursor aimed at ``position``; ``None`` for unsupported angles."""
    resolved = Angle.coerce(angle)
    if resolved is None:
        return None
    offset = anchor_offset(cursor.range, cursor.range, resolved)
    if offset is None:
        return None
    offset_x, offset_y = offset
    return StyleDescriptor(
        top=(position.row + offset_y) * cell_size,
        left=(position.col + offset_x + 1) * cell_size,
        width=cursor.range * cell_size,
        height=cursor.range * cell_size,
        image_path=cursor.path,
        angle=resolved,
    )
