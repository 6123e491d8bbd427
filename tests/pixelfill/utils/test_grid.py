from pixelfill.utils.grid import Direction, Grid


def test_generate_builds_cells_from_coordinates():
    grid = Grid.generate(3, 2, lambda x, y: (x, y))
    assert grid.width == 3 and grid.height == 2
    assert grid.get((2, 1)) == (2, 1)
    assert grid.get((0, 0)) == (0, 0)
    assert len(grid) == 6


def test_get_out_of_range_is_absent():
    grid = Grid.generate(2, 2, lambda x, y: x + y)
    assert grid.get((2, 0)) is None
    assert grid.get((0, 2)) is None
    # Negative coordinates must not wrap around like list indices.
    assert grid.get((-1, 0)) is None
    assert grid.get((0, -1)) is None


def test_set_out_of_range_is_ignored():
    grid = Grid.fill(2, 2, 0)
    grid.set((5, 5), 9)
    grid.set((-1, 1), 9)
    assert [grid.get(c) for c in grid.coords()] == [0, 0, 0, 0]
    grid.set((1, 0), 7)
    assert grid.get((1, 0)) == 7


def test_fill_copies_the_value_per_cell():
    grid = Grid.fill(2, 1, [])
    grid.get((0, 0)).append('x')
    assert grid.get((1, 0)) == []


def test_coords_are_row_major():
    grid = Grid.fill(2, 2, None)
    assert list(grid.coords()) == [(0, 0), (1, 0), (0, 1), (1, 1)]


def test_neighbor_respects_bottom_up_rows():
    grid = Grid.fill(3, 3, None)
    assert grid.neighbor((1, 1), Direction.UP) == (1, 2)
    assert grid.neighbor((1, 1), Direction.DOWN) == (1, 0)
    assert grid.neighbor((1, 1), Direction.LEFT) == (0, 1)
    assert grid.neighbor((1, 1), Direction.RIGHT) == (2, 1)
    assert grid.neighbor((0, 0), Direction.LEFT) is None
    assert grid.neighbor((2, 2), Direction.UP) is None


def test_zero_sized_grid_has_no_cells():
    grid = Grid.generate(0, 0, lambda x, y: 1)
    assert list(grid.coords()) == []
    assert grid.get((0, 0)) is None
