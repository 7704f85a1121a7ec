from scoresnake.geometry import DIRS, add, in_bounds, manhattan


def test_in_bounds_accepts_every_corner():
    for x, y in [(0, 0), (10, 0), (0, 10), (10, 10)]:
        assert in_bounds(x, y, 11, 11)


def test_in_bounds_rejects_outside_cells():
    assert not in_bounds(-1, 0, 11, 11)
    assert not in_bounds(0, -1, 11, 11)
    assert not in_bounds(11, 0, 11, 11)
    assert not in_bounds(0, 11, 11, 11)


def test_manhattan_distance():
    assert manhattan((5, 7), (5, 7)) == 0
    assert manhattan((0, 0), (3, 4)) == 7
    assert manhattan((3, 4), (0, 0)) == 7


def test_directions_follow_y_up_convention():
    assert add((5, 5), DIRS["up"]) == (5, 6)
    assert add((5, 5), DIRS["down"]) == (5, 4)
    assert add((5, 5), DIRS["left"]) == (4, 5)
    assert add((5, 5), DIRS["right"]) == (6, 5)
