import pytest

from navalchess.game.core.board import build_empty_board, mark_checked
from navalchess.game.core.models import Angle, Position, TerrainType, UnitType
from navalchess.game.core.units import Cursor, Unit


def test_unit_from_template_starts_unplaced(cruiser_template) -> None:
    unit = Unit.from_template(cruiser_template)
    assert unit.id is UnitType.CRUISER
    assert unit.angle is Angle.DEG_0
    assert unit.center is None
    assert not unit.is_placed
    assert unit.occupied == frozenset()
    assert unit.terrain is TerrainType.SEA
    assert unit.price == cruiser_template.price
    assert unit.image_path == cruiser_template.unit_image_path
    assert unit.is_ship


def test_with_center_recomputes_footprint(cruiser_template) -> None:
    unit = Unit.from_template(cruiser_template).with_center(Position(5, 5))
    assert unit.occupied == {Position(4, 5), Position(5, 5), Position(6, 5)}
    moved = unit.with_center(Position(2, 1))
    assert moved.occupied == {Position(1, 1), Position(2, 1), Position(3, 1)}
    assert unit.occupied == {Position(4, 5), Position(5, 5), Position(6, 5)}
    assert moved.key == unit.key


def test_rotate_swaps_dimensions_and_recomputes(cruiser_template) -> None:
    unit = Unit.from_template(cruiser_template).with_center(Position(5, 5))
    rotated = unit.rotate()
    assert rotated.angle is Angle.DEG_90
    assert (rotated.width, rotated.height) == (3, 1)
    assert rotated.is_vertical
    assert rotated.occupied == {Position(5, 4), Position(5, 5), Position(5, 6)}
    assert unit.angle is Angle.DEG_0


def test_four_rotations_round_trip(cruiser_template) -> None:
    unit = Unit.from_template(cruiser_template).with_center(Position(5, 5))
    turned = unit.rotate().rotate().rotate().rotate()
    assert turned.angle is unit.angle
    assert (turned.width, turned.height) == (unit.width, unit.height)
    assert turned.occupied == unit.occupied


def test_with_angle_and_int_angle_coercion(cruiser_template) -> None:
    unit = Unit.from_template(cruiser_template, angle=Angle.DEG_180).with_center(Position(5, 5))
    assert unit.with_angle(Angle.DEG_270).angle is Angle.DEG_270
    raw = Unit(id=UnitType.MINE, base_width=1, base_height=1, angle=90)
    assert raw.angle is Angle.DEG_90
    with pytest.raises(ValueError):
        Unit(id=UnitType.MINE, base_width=1, base_height=1, angle=45)


def test_keys_are_unique_per_created_unit(cruiser_template) -> None:
    first = Unit.from_template(cruiser_template)
    second = Unit.from_template(cruiser_template)
    assert first.key != second.key


def test_unit_survives_until_every_cell_checked() -> None:
    unit = Unit(id=UnitType.DESTROYER, base_width=3, base_height=1, center=Position(0, 1))
    assert unit.occupied == {Position(0, 0), Position(0, 1), Position(0, 2)}
    board = build_empty_board(1, 3)

    assert unit.is_survive(board)
    mark_checked(board, Position(0, 0))
    mark_checked(board, Position(0, 2))
    assert unit.is_survive(board)
    mark_checked(board, Position(0, 1))
    assert not unit.is_survive(board)


def test_survival_ignores_cells_missing_from_board() -> None:
    unit = Unit(id=UnitType.MINE, base_width=1, base_height=1, center=Position(20, 20))
    assert not unit.is_survive(build_empty_board(2, 2))


def test_unplaced_unit_is_not_alive(cruiser_template, sea_board) -> None:
    assert not Unit.from_template(cruiser_template).is_survive(sea_board)


def test_cursor_range_grid_covers_square(radar_template) -> None:
    cursor = Cursor.from_template(radar_template)
    assert cursor.range == 3
    assert cursor.path == radar_template.cursor_path
    grid = cursor.range_grid(Position(4, 4), 0)
    assert grid == {Position(r, c) for r in (3, 4, 5) for c in (3, 4, 5)}


def test_cursor_range_grid_non_zero_angle_and_unsupported(radar_template) -> None:
    cursor = Cursor(id=UnitType.TURRET, path="turret.png", range=2)
    assert cursor.range_grid(Position(0, 0), 90) == {
        Position(0, 0),
        Position(0, -1),
        Position(-1, 0),
        Position(-1, -1),
    }
    assert cursor.range_grid(Position(0, 0), 45) is None


def test_cursor_without_asset_has_empty_path_and_grid(catalog) -> None:
    cursor = Cursor.from_template(catalog[UnitType.MINE])
    assert cursor.path == ""
    assert cursor.range_grid(Position(1, 1), 0) == frozenset()
