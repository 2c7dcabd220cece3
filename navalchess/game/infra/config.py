"""Application configuration and env loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from navalchess.game.core.catalog import DEFAULT_CATALOG, UnitTemplate, load_catalog
from navalchess.game.core.models import (
    DEFAULT_CELL_SIZE,
    DEFAULT_COLUMNS,
    DEFAULT_INITIAL_BUDGET,
    DEFAULT_ROWS,
    BoardConfig,
)
from navalchess.game.infra.app_data import resolve_config_dir

logger = logging.getLogger(__name__)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    loaded = 0
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        value = _unquote(value.strip())
        if override_existing or key not in os.environ:
            os.environ[key] = value
            loaded += 1
    logger.debug("env_file_loaded path=%s keys=%d", env_path, loaded)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order:
    1) <app data>/config/.env
    2) <app data>/config/.env.local
    3) .env
    4) .env.local
    """
    if paths is None:
        config_dir = resolve_config_dir()
        paths = (
            str(config_dir / ".env"),
            str(config_dir / ".env.local"),
            ".env",
            ".env.local",
        )
    for path in paths:
        load_env_file(path, override_existing=override_existing)


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("config_invalid_int name=%s value=%r default=%d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("config_non_positive name=%s value=%d default=%d", name, value, default)
        return default
    return value


def load_board_config() -> BoardConfig:
    """Resolve board configuration from env vars."""
    return BoardConfig(
        rows=_positive_int("NAVALCHESS_BOARD_ROWS", DEFAULT_ROWS),
        columns=_positive_int("NAVALCHESS_BOARD_COLUMNS", DEFAULT_COLUMNS),
        cell_size=_positive_int("NAVALCHESS_CELL_SIZE", DEFAULT_CELL_SIZE),
        initial_budget=_positive_int("NAVALCHESS_INITIAL_BUDGET", DEFAULT_INITIAL_BUDGET),
    )


def load_configured_catalog() -> tuple[UnitTemplate, ...]:
    """Load the catalog named by ``NAVALCHESS_CATALOG_PATH`` or fall back to the default."""
    configured = os.getenv("NAVALCHESS_CATALOG_PATH", "").strip()
    if not configured:
        return DEFAULT_CATALOG
    return load_catalog(Path(configured))
