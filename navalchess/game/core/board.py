"""Board assembly, lookups and cell mutation helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

import numpy as np

from navalchess.game.core.models import Board, BoardConfig, CellInfo, Position, TerrainType
from navalchess.game.core.units import Unit

logger = logging.getLogger(__name__)

TERRAIN_CODES: dict[TerrainType, int] = {
    TerrainType.NONE: -1,
    TerrainType.SEA: 0,
    TerrainType.ISLAND: 1,
}


def build_empty_board(
    rows: int,
    cols: int,
    default_terrain: TerrainType = TerrainType.SEA,
    existing: Mapping[Position, CellInfo] | None = None,
) -> Board:
    """Create a fresh ``rows`` x ``cols`` board, keeping terrain from ``existing``."""
    board: Board = {}
    for r in range(rows):
        for c in range(cols):
            pos = Position(r, c)
            source = existing.get(pos) if existing is not None else None
            terrain = source.terrain if source is not None else default_terrain
            board[pos] = CellInfo(terrain=terrain)
    logger.debug("empty_board_built rows=%d cols=%d cells=%d", rows, cols, len(board))
    return board


def build_mirrored_board(config: BoardConfig, left_half: Mapping[Position, CellInfo]) -> Board:
    """Mirror a half-board into a full two-player board with label gutters."""
    rows = config.rows
    half_cols = config.columns
    full_cols = half_cols * 2
    board: Board = {}

    for row in range(rows):
        for col in range(half_cols):
            base = left_half.get(Position(row, col))
            if base is None:
                continue
            board[Position(row, col)] = CellInfo(terrain=base.terrain)
            board[Position(row, full_cols - 1 - col)] = CellInfo(terrain=base.terrain)

    for row in range(rows):
        board[Position(row, -1)] = CellInfo(terrain=TerrainType.NONE)
        board[Position(row, full_cols)] = CellInfo(terrain=TerrainType.NONE)
    for col in range(full_cols):
        board[Position(rows, col)] = CellInfo(terrain=TerrainType.NONE)

    logger.debug(
        "mirrored_board_built rows=%d half_cols=%d cells=%d", rows, half_cols, len(board)
    )
    return board


def cell_at(board: Mapping[Position, CellInfo], position: Position) -> CellInfo | None:
    """Return the cell at ``position`` or ``None`` when absent."""
    return board.get(position)


def is_playable(board: Mapping[Position, CellInfo], position: Position) -> bool:
    """Return whether the position is a real sea/island cell."""
    cell = board.get(position)
    return cell is not None and cell.terrain is not TerrainType.NONE


def can_place(board: Mapping[Position, CellInfo], unit: Unit) -> bool:
    """Return whether the unit fits on matching, free terrain."""
    if not unit.occupied:
        return False
    for position in unit.occupied:
        cell = board.get(position)
        if cell is None or cell.terrain is TerrainType.NONE:
            return False
        if cell.terrain is not unit.terrain:
            return False
        if cell.occupant is not None and cell.occupant != unit.key:
            return False
    return True


def place_unit(board: Board, unit: Unit) -> None:
    """Record the unit as occupant of every footprint cell."""
    if not can_place(board, unit):
        logger.info("placement_rejected unit=%s key=%d center=%s", unit.id.value, unit.key, unit.center)
        raise ValueError(f"Invalid placement for {unit.id.value}.")
    for position in unit.occupied:
        board[position].occupant = unit.key
    logger.debug("unit_placed unit=%s key=%d cells=%d", unit.id.value, unit.key, len(unit.occupied))


def remove_unit(board: Board, unit: Unit) -> int:
    """Clear every back-reference to the unit and return how many were cleared."""
    cleared = 0
    for cell in board.values():
        if cell.occupant == unit.key:
            cell.occupant = None
            cleared += 1
    return cleared


def move_unit(board: Board, current: Unit, updated: Unit) -> None:
    """Re-place a unit after it was moved or rotated.

    The previous footprint is restored if the new one does not fit.
    """
    remove_unit(board, current)
    try:
        place_unit(board, updated)
    except ValueError:
        place_unit(board, current)
        raise


def mark_checked(board: Board, position: Position) -> bool:
    """Flag a playable cell as fired upon; return ``False`` for repeats or misses off-board."""
    cell = board.get(position)
    if cell is None or cell.terrain is TerrainType.NONE or cell.is_checked:
        return False
    cell.is_checked = True
    return True


def record_detection(board: Board, positions: Iterable[Position]) -> int:
    """Mark playable cells as detected and bump their counters."""
    marked = 0
    for position in positions:
        cell = board.get(position)
        if cell is None or cell.terrain is TerrainType.NONE:
            continue
        cell.is_detected = True
        cell.detect_count += 1
        marked += 1
    return marked


def terrain_grid(board: Mapping[Position, CellInfo], rows: int, cols: int) -> np.ndarray:
    """Return terrain codes for the playable rectangle; absent cells read as ``NONE``."""
    grid = np.full((rows, cols), TERRAIN_CODES[TerrainType.NONE], dtype=np.int8)
    for r in range(rows):
        for c in range(cols):
            cell = board.get(Position(r, c))
            if cell is not None:
                grid[r, c] = TERRAIN_CODES[cell.terrain]
    return grid


def checked_grid(board: Mapping[Position, CellInfo], rows: int, cols: int) -> np.ndarray:
    """Return a boolean mask of checked cells for the playable rectangle."""
    grid = np.zeros((rows, cols), dtype=bool)
    for r in range(rows):
        for c in range(cols):
            cell = board.get(Position(r, c))
            if cell is not None and cell.is_checked:
                grid[r, c] = True
    return grid
