from __future__ import annotations

from typing import List, Union

import numpy as np

import src.disconnect_path.config as cfg
from src.disconnect_path.grid import LandGrid
from src.disconnect_path.types import Grid, Index2D, InvalidInputError


def _land(grid: Union[LandGrid, Grid]) -> LandGrid:
    # raw arrays are wrapped, not copied: the probe mutates the caller's cells
    if isinstance(grid, LandGrid):
        return grid
    if isinstance(grid, np.ndarray) and grid.ndim == 2:
        return LandGrid(C=grid)
    raise InvalidInputError(
        f"probe needs a LandGrid or a 2-D numpy array, got {type(grid).__name__}; "
        f"build one with LandGrid.from_rows"
    )


def probe_recursive(origin: Index2D, grid: Union[LandGrid, Grid]) -> bool:
    """
    Depth-first reachability from origin to the bottom-right cell, moving only
    down or right. Visited LAND cells are turned into WATER and stay that way,
    dead ends included. Down is tried first; right is skipped once down succeeds.
    """
    land = _land(grid)
    i, j = origin

    # destination before bounds: the corner itself is never flipped
    if (i, j) == land.destination:
        return True
    if not land.in_bounds(i, j):
        return False

    if land.is_land(i, j):
        land.set_water(i, j)
        return probe_recursive((i + 1, j), land) or probe_recursive((i, j + 1), land)
    return False


def probe_iterative(origin: Index2D, grid: Union[LandGrid, Grid]) -> bool:
    """
    Same traversal as probe_recursive with an explicit stack. Down is pushed
    last so it is popped first, which keeps the visit order (and therefore the
    set of cells turned to WATER) identical.
    """
    land = _land(grid)
    dest = land.destination

    stack: List[Index2D] = [origin]
    while stack:
        i, j = stack.pop()
        if (i, j) == dest:
            return True
        if not land.in_bounds(i, j) or not land.is_land(i, j):
            continue

        land.set_water(i, j)
        stack.extend(reversed(land.neighbors_down_right(i, j)))

    return False


def probe(origin: Index2D, grid: Union[LandGrid, Grid]) -> bool:
    """
    One probe from origin. Recursion depth is bounded by rows + cols, so large
    grids go through the explicit stack instead.
    """
    land = _land(grid)
    n, m = land.shape
    if n + m < cfg.RECURSION_CUTOVER:
        return probe_recursive(origin, land)
    return probe_iterative(origin, land)
