import itertools

import pytest

from hexlattice import (
    Axial,
    Cube,
    InvalidDirection,
    Offset,
    axial_direction,
    axial_to_cube,
    cube_direction,
    cube_neighbor,
    cube_to_axial,
    cube_to_offset,
    hex_neighbor,
    neighbors_axial,
    neighbors_cube,
    neighbors_offset,
    normalize_direction,
    offset_direction,
    offset_neighbor,
    offset_to_cube,
)


def test_neighbors_axial_six():
    n = list(neighbors_axial(Axial(0, 0)))
    assert len(n) == 6
    assert Axial(1, 0) in n
    assert Axial(0, 1) in n


def test_neighbors_cube_follow_direction_order():
    origin = Cube(0, 0, 0)
    assert list(neighbors_cube(origin)) == [cube_direction(d) for d in range(6)]


def test_cube_direction_table():
    assert [cube_direction(d) for d in range(6)] == [
        Cube(1, -1, 0),
        Cube(1, 0, -1),
        Cube(0, 1, -1),
        Cube(-1, 1, 0),
        Cube(-1, 0, 1),
        Cube(0, -1, 1),
    ]


def test_axial_direction_table():
    assert [axial_direction(d) for d in range(6)] == [
        Axial(1, 0),
        Axial(1, -1),
        Axial(0, -1),
        Axial(-1, 0),
        Axial(-1, 1),
        Axial(0, 1),
    ]


@pytest.mark.parametrize(
    ("direction", "expected"),
    [(0, 0), (5, 5), (6, 0), (13, 1), (-1, 5), (-6, 0), (-7, 5), (-128, 4)],
)
def test_normalize_direction_wraps(direction: int, expected: int):
    assert normalize_direction(direction) == expected


@pytest.mark.parametrize("direction", [1.5, "2", None, True])
def test_non_integer_direction_fails_loudly(direction):
    with pytest.raises(InvalidDirection) as excinfo:
        cube_direction(direction)
    assert excinfo.value.direction is direction


def test_negative_direction_never_yields_zero_vector():
    for d in range(-12, 0):
        assert cube_direction(d) != Cube(0, 0, 0)
        assert cube_direction(d) == cube_direction(d + 6)


@pytest.mark.parametrize("direction", range(-6, 12))
def test_cube_and_axial_neighbors_agree(direction: int):
    for h in (Cube(0, 0, 0), Cube(2, -5, 3), Cube(-4, 1, 3)):
        expected = cube_neighbor(h, direction)
        assert axial_to_cube(hex_neighbor(cube_to_axial(h), direction)) == expected


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (
            Offset(4, 4),
            {
                (3, 3),
                (3, 4),
                (3, 5),
                (4, 3),
                (4, 5),
                (5, 4),
            },
        ),
        (
            Offset(4, 5),
            {
                (3, 5),
                (4, 4),
                (4, 6),
                (5, 4),
                (5, 5),
                (5, 6),
            },
        ),
    ],
)
def test_neighbors_offset_exact_neighbor_sets(offset: Offset, expected: set[tuple[int, int]]):
    actual = {(n.col, n.row) for n in neighbors_offset(offset)}
    assert actual == expected


def test_offset_tables_differ_by_parity():
    even = [offset_direction(0, d) for d in range(6)]
    odd = [offset_direction(1, d) for d in range(6)]
    assert even != odd
    assert offset_neighbor(Offset(0, 0), 1) == Offset(0, -1)
    assert offset_neighbor(Offset(0, 1), 1) == Offset(1, 0)


def test_offset_direction_rejects_bad_parity():
    with pytest.raises(ValueError):
        offset_direction(2, 0)


@pytest.mark.parametrize(("col", "row"), list(itertools.product(range(-3, 4), range(-3, 4))))
def test_offset_neighbors_match_cube_neighbors(col: int, row: int):
    o = Offset(col, row)
    for d in range(6):
        via_cube = cube_to_offset(cube_neighbor(offset_to_cube(o), d))
        assert offset_neighbor(o, d) == via_cube
