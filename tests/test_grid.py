import pytest

from lifehash.color import Color
from lifehash.grid import CellGrid, ChangeGrid, FracGrid, Point


def _cells(grid, alive):
    grid.set_all(False)
    for p in alive:
        grid.set_value(True, p)
    return grid


def _alive(grid):
    return {p for p in grid.points() if grid.get_value(p)}


def _step(cells):
    change = ChangeGrid(cells.width, cells.height)
    change.set_all(True)
    nxt = CellGrid(cells.width, cells.height)
    nxt_change = ChangeGrid(cells.width, cells.height)
    cells.next_generation(change, nxt, nxt_change)
    return nxt, nxt_change


def test_points_are_row_major():
    grid = CellGrid(3, 2)
    assert list(grid.points()) == [
        Point(0, 0), Point(1, 0), Point(2, 0),
        Point(0, 1), Point(1, 1), Point(2, 1),
    ]


def test_neighborhood_wraps_around_edges():
    grid = CellGrid(4, 4)
    pairs = dict(grid.neighborhood(Point(0, 0)))
    assert len(pairs) == 9
    assert pairs[Point(0, 0)] == Point(0, 0)
    assert pairs[Point(-1, -1)] == Point(3, 3)
    assert all(0 <= p.x < 4 and 0 <= p.y < 4 for p in pairs.values())


def test_set_and_get_value():
    grid = FracGrid(4, 3)
    grid.set_value(0.5, Point(3, 2))
    assert grid.get_value(Point(3, 2)) == 0.5
    assert grid.get_value(Point(2, 2)) == 0.0


def test_set_all():
    grid = ChangeGrid(3, 3)
    grid.set_all(True)
    assert all(grid.get_value(p) for p in grid.points())


def test_data_round_trip():
    data = bytes(range(1, 33))
    grid = CellGrid(16, 16)
    grid.set_data(data)
    assert grid.data() == data


def test_set_data_bit_order():
    grid = CellGrid(8, 1)
    grid.set_data(b"\x80")
    assert _alive(grid) == {Point(0, 0)}


def test_set_data_wrong_size_raises():
    with pytest.raises(ValueError):
        CellGrid(16, 16).set_data(b"\x00" * 31)


def test_blinker_oscillates():
    vertical = {Point(2, 1), Point(2, 2), Point(2, 3)}
    cells = _cells(CellGrid(5, 5), vertical)
    nxt, _ = _step(cells)
    assert _alive(nxt) == {Point(1, 2), Point(2, 2), Point(3, 2)}
    back, _ = _step(nxt)
    assert _alive(back) == vertical


def test_block_is_still_and_reports_no_changes():
    block = {Point(1, 1), Point(2, 1), Point(1, 2), Point(2, 2)}
    cells = _cells(CellGrid(6, 6), block)
    nxt, nxt_change = _step(cells)
    assert _alive(nxt) == block
    assert not any(nxt_change.get_value(p) for p in nxt_change.points())


def test_changed_cells_mark_their_neighborhood():
    cells = _cells(CellGrid(5, 5), {Point(2, 2)})
    nxt, nxt_change = _step(cells)
    assert _alive(nxt) == set()
    marked = {p for p in nxt_change.points() if nxt_change.get_value(p)}
    assert marked == {p for _, p in nxt_change.neighborhood(Point(2, 2))}


def test_unchanged_cells_are_copied():
    cells = _cells(CellGrid(5, 5), {Point(2, 2)})
    change = ChangeGrid(5, 5)
    nxt = CellGrid(5, 5)
    nxt_change = ChangeGrid(5, 5)
    cells.next_generation(change, nxt, nxt_change)
    assert _alive(nxt) == {Point(2, 2)}


def test_overlay_sets_fraction_on_live_cells():
    cells = _cells(CellGrid(3, 3), {Point(0, 0), Point(2, 1)})
    frac = FracGrid(3, 3)
    frac.overlay(cells, 0.75)
    assert frac.get_value(Point(0, 0)) == 0.75
    assert frac.get_value(Point(2, 1)) == 0.75
    assert frac.get_value(Point(1, 1)) == 0.0


def test_cell_grid_colors():
    cells = _cells(CellGrid(2, 1), {Point(0, 0)})
    assert cells.colors() == [1.0, 1.0, 1.0, 0.0, 0.0, 0.0]


def test_change_grid_colors():
    grid = ChangeGrid(2, 2)
    assert grid.color_for_value(True) == Color.red
    assert grid.color_for_value(False) == Color.blue
    assert len(grid.colors()) == 3 * grid.capacity


def test_frac_grid_colors_at_ends():
    grid = FracGrid(1, 1)
    assert grid.color_for_value(0.0) == Color.black
    assert grid.color_for_value(1.0) == Color.white