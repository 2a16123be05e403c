import pytest

from hexlattice import Cube, cube_direction, cube_rotate, cube_rotate_about

SAMPLES = [Cube(0, 0, 0), Cube(1, -1, 0), Cube(3, -5, 2), Cube(-4, 1, 3)]
PIVOTS = [Cube(0, 0, 0), Cube(2, -1, -1), Cube(-3, 5, -2)]


def test_clockwise_and_counter_clockwise_formulas():
    h = Cube(1, -3, 2)
    assert cube_rotate(h, clockwise=True) == Cube(-2, -1, 3)
    assert cube_rotate(h, clockwise=False) == Cube(3, -2, -1)


@pytest.mark.parametrize("direction", range(6))
def test_rotation_steps_between_directions(direction: int):
    d = cube_direction(direction)
    assert cube_rotate(d, clockwise=False) == cube_direction(direction + 1)
    assert cube_rotate(d, clockwise=True) == cube_direction(direction - 1)


@pytest.mark.parametrize("clockwise", [True, False])
@pytest.mark.parametrize("pivot", PIVOTS)
def test_six_rotations_return_to_start(clockwise: bool, pivot: Cube):
    for h in SAMPLES:
        current = h
        for _ in range(6):
            current = cube_rotate_about(current, pivot, clockwise)
            assert current.x + current.y + current.z == 0
        assert current == h


def test_opposite_rotations_cancel():
    for h in SAMPLES:
        assert cube_rotate(cube_rotate(h, True), False) == h


def test_steps_keyword():
    h = Cube(3, -5, 2)
    assert cube_rotate(h, steps=3) == -h
    assert cube_rotate(h, steps=0) == h
    assert cube_rotate(h, steps=6) == h
    assert cube_rotate(h, True, steps=-1) == cube_rotate(h, False)


def test_rotation_about_pivot_keeps_pivot_fixed():
    pivot = Cube(2, -1, -1)
    assert cube_rotate_about(pivot, pivot, True) == pivot
    assert cube_rotate_about(Cube(3, -2, -1), pivot, False) == Cube(3, -1, -2)
