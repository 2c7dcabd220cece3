from __future__ import annotations

import pytest

from navalchess.game.core.board import build_empty_board
from navalchess.game.core.catalog import UnitTemplate, catalog_by_type
from navalchess.game.core.models import Board, BoardConfig, TerrainType, UnitType


@pytest.fixture
def catalog() -> dict[UnitType, UnitTemplate]:
    return catalog_by_type()


@pytest.fixture
def cruiser_template(catalog: dict[UnitType, UnitTemplate]) -> UnitTemplate:
    return catalog[UnitType.CRUISER]


@pytest.fixture
def radar_template(catalog: dict[UnitType, UnitTemplate]) -> UnitTemplate:
    return catalog[UnitType.RADAR]


@pytest.fixture
def board_config() -> BoardConfig:
    return BoardConfig(rows=12, columns=8, cell_size=50, initial_budget=500)


@pytest.fixture
def sea_board(board_config: BoardConfig) -> Board:
    return build_empty_board(board_config.rows, board_config.columns, TerrainType.SEA)
