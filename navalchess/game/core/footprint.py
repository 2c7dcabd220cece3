"""Footprint computation for units and range cursors.

Offsets spread outward from the center cell: offset ``k`` is ``(i + 1) // 2``
for loop index ``i``, signed by an accumulator that flips every step. The
column accumulator keeps flipping across rows, so for odd widths consecutive
rows receive mirrored column sequences while even widths repeat the same one.
"""

from __future__ import annotations

from collections.abc import Iterator

from navalchess.game.core.models import Angle, Position


def initial_signs(angle: Angle) -> tuple[int, int]:
    """Return the starting ``(row_sign, col_sign)`` for an orientation."""
    if angle is Angle.DEG_0:
        return 1, 1
    return -1, -1


def iter_offsets(width: int, height: int, angle: Angle) -> Iterator[tuple[int, int]]:
    """Yield ``(row_offset, col_offset)`` pairs in row-major order."""
    row_sign, col_sign = initial_signs(angle)
    for r in range(height):
        row_sign = -row_sign
        row_offset = ((r + 1) // 2) * row_sign
        for c in range(width):
            col_sign = -col_sign
            yield row_offset, ((c + 1) // 2) * col_sign


def footprint(
    width: int, height: int, center: Position, angle: int | Angle
) -> frozenset[Position] | None:
    """Compute the cells covered by a ``width`` x ``height`` shape.

    Returns ``None`` when ``angle`` is not one of the four supported values.
    """
    resolved = Angle.coerce(angle)
    if resolved is None:
        return None
    return frozenset(
        Position(center.row + row_offset, center.col + col_offset)
        for row_offset, col_offset in iter_offsets(width, height, resolved)
    )


def row_patterns(width: int, height: int, angle: Angle) -> list[tuple[int, ...]]:
    """Return the column-offset sequence used by each row."""
    offsets = list(iter_offsets(width, height, angle))
    return [
        tuple(col for _, col in offsets[r * width : (r + 1) * width]) for r in range(height)
    ]
