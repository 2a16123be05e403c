from hexlattice import (
    Cube,
    Unit,
    cube_distance,
    cube_linedraw,
    cube_to_offset,
    unit_rotate,
)

start = Cube(0, 0, 0)
goal = Cube(4, -1, -3)

bar = Unit((Cube(0, 0, 0), Cube(1, -1, 0), Cube(2, -2, 0)), pivot=Cube(1, -1, 0))


if __name__ == "__main__":
    print("distance:", cube_distance(start, goal))
    for cell in cube_linedraw(start, goal, include_end=True):
        print("cell:", cell, "offset:", cube_to_offset(cell))
    print("rotated:", unit_rotate(bar, clockwise=True).members)
