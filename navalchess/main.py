"""Application entry point."""

from __future__ import annotations

import logging

from navalchess.game.core.board import build_empty_board, build_mirrored_board
from navalchess.game.core.catalog import catalog_by_type
from navalchess.game.core.models import Board, TerrainType
from navalchess.game.infra.app_data import ensure_app_data_dirs
from navalchess.game.infra.config import (
    load_board_config,
    load_configured_catalog,
    load_default_env_files,
)
from navalchess.game.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def bootstrap() -> Board:
    """Load configuration and build the opening two-player board."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    logger.info("app_data_paths root=%s logs=%s config=%s", paths["root"], paths["logs"], paths["config"])

    config = load_board_config()
    catalog = catalog_by_type(load_configured_catalog())
    logger.info(
        "match_config rows=%d half_cols=%d cell_size=%d budget=%d units=%d",
        config.rows,
        config.columns,
        config.cell_size,
        config.initial_budget,
        len(catalog),
    )
    half_board = build_empty_board(config.rows, config.columns, TerrainType.SEA)
    return build_mirrored_board(config, half_board)


def main() -> None:
    """Run the NavalChess board bootstrap."""
    board = bootstrap()
    logger.info("board_ready cells=%d", len(board))


if __name__ == "__main__":
    main()
