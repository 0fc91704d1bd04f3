from __future__ import annotations

from typing import List

import numpy as np

from src.disconnect_path.types import CellType, Grid, Index2D, InvalidInputError


class LandGrid:
    """
    Rectangular land/water grid. C holds CellType tags and is mutated in place
    by probes: a visited LAND cell becomes WATER.
    """
    def __init__(self, C: Grid):
        self.C = C

    @classmethod
    def from_rows(cls, rows) -> "LandGrid":
        return cls(C=validate_rows(rows))

    @property
    def shape(self) -> Index2D:
        n, m = self.C.shape
        return n, m

    @property
    def destination(self) -> Index2D:
        n, m = self.C.shape
        return n - 1, m - 1

    def in_bounds(self, i: int, j: int) -> bool:
        n, m = self.C.shape
        return 0 <= i < n and 0 <= j < m

    def neighbors_down_right(self, i: int, j: int) -> List[Index2D]:
        cand = ((i + 1, j), (i, j + 1))
        return [(x, y) for (x, y) in cand if self.in_bounds(x, y)]

    def is_land(self, i: int, j: int) -> bool:
        return self.C[i, j] == CellType.LAND

    def set_land(self, i: int, j: int) -> None:
        self.C[i, j] = CellType.LAND

    def set_water(self, i: int, j: int) -> None:
        self.C[i, j] = CellType.WATER

    def count_land(self) -> int:
        return int(np.sum(self.C == CellType.LAND))


def validate_rows(rows) -> Grid:
    """
    Build a fresh integer array from a sequence of rows (or a 2-D array).
    Raises InvalidInputError on empty, ragged, non-2-D or non-binary input.
    Bools are normalized to 0/1.
    """
    if isinstance(rows, np.ndarray):
        raw = rows
    else:
        rows = list(rows)
        if not rows:
            raise InvalidInputError("Grid has no rows")
        widths = []
        for r, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
                raise InvalidInputError(f"Row {r} is not a sequence: {row!r}")
            widths.append(len(row))
        if len(set(widths)) != 1:
            raise InvalidInputError(f"Grid is not rectangular, row lengths: {widths}")
        raw = np.array(rows, dtype=object)

    validate_cells(raw)
    return raw.astype(int)


def validate_cells(C: Grid) -> Grid:
    """
    Check an existing array in place: two-dimensional, at least 1x1, every
    value 0 or 1 (bools included). Returns the same array, nothing is copied.
    """
    if not isinstance(C, np.ndarray):
        raise InvalidInputError(f"Grid cells must be a numpy array, got {type(C).__name__}")
    if C.ndim != 2:
        raise InvalidInputError(f"Grid must be two-dimensional, got ndim={C.ndim}")
    n, m = C.shape
    if n == 0 or m == 0:
        raise InvalidInputError(f"Grid must have at least one row and one column, got {n}x{m}")
    if C.dtype.kind not in "biufO":
        raise InvalidInputError(f"Grid dtype {C.dtype} is not numeric")

    bad = ~np.isin(C, (CellType.WATER, CellType.LAND))
    if bad.any():
        i, j = (int(x) for x in np.argwhere(bad)[0])
        raise InvalidInputError(f"Cell ({i}, {j}) holds {C[i, j]!r}, expected 0 or 1")
    return C


def as_land_grid(grid) -> LandGrid:
    """A LandGrid is checked and used as is, anything else is validated into a new one."""
    if isinstance(grid, LandGrid):
        validate_cells(grid.C)
        return grid
    return LandGrid.from_rows(grid)
