import numpy as np
import pytest

from src.disconnect_path.cut_check import is_possible_to_cut_path
from src.disconnect_path.grid import LandGrid, as_land_grid, validate_cells, validate_rows
from src.disconnect_path.types import CellType, InvalidInputError


def test_from_rows_builds_int_grid():
    land = LandGrid.from_rows([[1, 0, 1], [1, 1, 0]])
    assert land.shape == (2, 3)
    assert land.destination == (1, 2)
    assert land.C.dtype.kind == "i"
    assert land.count_land() == 4
    assert land.is_land(0, 2) and not land.is_land(0, 1)


def test_bools_are_normalized():
    land = LandGrid.from_rows([[True, False], [False, True]])
    assert land.C.tolist() == [[1, 0], [0, 1]]

    arr = np.array([[True, True], [False, True]])
    assert validate_rows(arr).tolist() == [[1, 1], [0, 1]]


def test_input_is_copied():
    rows = [[1, 1], [0, 1]]
    land = LandGrid.from_rows(rows)
    land.set_water(0, 1)
    assert rows == [[1, 1], [0, 1]]

    arr = np.ones((2, 2), dtype=int)
    land = as_land_grid(arr)
    land.set_water(0, 0)
    assert arr[0, 0] == 1


def test_land_grid_passes_through():
    land = LandGrid.from_rows([[1]])
    assert as_land_grid(land) is land


def test_bounds_and_neighbors():
    land = LandGrid.from_rows([[1, 1, 1], [1, 1, 1]])
    assert land.in_bounds(1, 2)
    assert not land.in_bounds(2, 0)
    assert not land.in_bounds(0, -1)
    assert land.neighbors_down_right(0, 0) == [(1, 0), (0, 1)]
    assert land.neighbors_down_right(1, 1) == [(1, 2)]
    assert land.neighbors_down_right(1, 2) == []


@pytest.mark.parametrize("rows", [
    [],
    [[]],
    [[], []],
    np.zeros((0, 3), dtype=int),
], ids=["no_rows", "empty_row", "empty_rows", "zero_rows_array"])
def test_empty_grid_rejected(rows):
    with pytest.raises(InvalidInputError):
        LandGrid.from_rows(rows)


def test_ragged_grid_rejected():
    with pytest.raises(InvalidInputError, match="not rectangular"):
        LandGrid.from_rows([[1, 1], [1]])


def test_non_2d_rejected():
    with pytest.raises(InvalidInputError):
        LandGrid.from_rows(np.ones(4, dtype=int))
    with pytest.raises(InvalidInputError):
        LandGrid.from_rows([[[1], [1]], [[1], [1]]])
    with pytest.raises(InvalidInputError):
        LandGrid.from_rows([1, 0, 1])
    with pytest.raises(InvalidInputError):
        LandGrid.from_rows(["10", "01"])


@pytest.mark.parametrize("bad", [2, -1, 0.5, "1", None])
def test_non_binary_rejected(bad):
    with pytest.raises(InvalidInputError, match=r"\(1, 0\)"):
        LandGrid.from_rows([[1, 1], [bad, 1]])


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInputError, ValueError)
    assert CellType.LAND == 1 and CellType.WATER == 0


@pytest.mark.parametrize("C", [
    np.zeros((0, 0), dtype=int),
    np.zeros((3, 0), dtype=int),
    np.array([[1, 2], [2, 1]]),
    np.array([[1, 0.5], [0, 1]]),
    np.ones(3, dtype=int),
    np.array([["1", "0"], ["0", "1"]]),
], ids=["empty", "no_columns", "value_two", "fraction", "one_dim", "strings"])
def test_land_grid_cells_checked(C):
    with pytest.raises(InvalidInputError):
        as_land_grid(LandGrid(C))
    with pytest.raises(InvalidInputError):
        is_possible_to_cut_path(LandGrid(C))


def test_land_grid_checked_without_copy():
    C = np.array([[1, 1], [0, 1]])
    land = LandGrid(C)
    assert as_land_grid(land) is land
    assert validate_cells(C) is C
    assert land.C is C

    C = np.array([[True, False], [True, True]])
    assert validate_cells(C) is C


def test_bad_cell_is_named():
    with pytest.raises(InvalidInputError, match=r"Cell \(0, 1\) holds"):
        validate_cells(np.array([[1, 2], [2, 1]]))


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
