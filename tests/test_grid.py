from sathi_snake.grid import Cell, Direction, in_bounds


def test_cell_shifted_by_each_direction():
    origin = Cell(5, 5)
    assert origin.shifted(Direction.UP) == Cell(5, 4)
    assert origin.shifted(Direction.DOWN) == Cell(5, 6)
    assert origin.shifted(Direction.LEFT) == Cell(4, 5)
    assert origin.shifted(Direction.RIGHT) == Cell(6, 5)


def test_cell_is_hashable_value():
    assert Cell(1, 2) == Cell(1, 2)
    assert len({Cell(1, 2), Cell(1, 2), Cell(2, 1)}) == 2


def test_reverses_only_the_exact_opposite():
    assert Direction.LEFT.reverses(Direction.RIGHT)
    assert Direction.UP.reverses(Direction.DOWN)
    assert not Direction.UP.reverses(Direction.RIGHT)
    assert not Direction.RIGHT.reverses(Direction.RIGHT)


def test_opposite_round_trips():
    for direction in Direction:
        assert direction.opposite.opposite is direction


def test_in_bounds_edges():
    assert in_bounds(Cell(0, 0), 13)
    assert in_bounds(Cell(12, 12), 13)
    assert not in_bounds(Cell(-1, 4), 13)
    assert not in_bounds(Cell(13, 4), 13)
    assert not in_bounds(Cell(4, 13), 13)
