from __future__ import annotations

from typing import List

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import breadth_first_order

from src.disconnect_path.grid import LandGrid, as_land_grid
from src.disconnect_path.types import CellType, CutReport, Index2D


def _land_mask(land: LandGrid) -> np.ndarray:
    # corners count as LAND, the same as the second probe sees them
    mask = land.C == CellType.LAND
    mask[0, 0] = True
    mask[-1, -1] = True
    return mask


def down_right_graph(land: LandGrid) -> csr_matrix:
    """
    Directed graph over flattened cell indices (i * cols + j) with an edge
    for every down or right step between two LAND cells.
    """
    mask = _land_mask(land)
    n, m = mask.shape
    idx = np.arange(n * m).reshape(n, m)

    down = mask[:-1, :] & mask[1:, :]
    right = mask[:, :-1] & mask[:, 1:]

    rows = np.concatenate([idx[:-1, :][down], idx[:, :-1][right]])
    cols = np.concatenate([idx[1:, :][down], idx[:, 1:][right]])
    data = np.ones(rows.shape[0], dtype=np.int8)

    return csr_matrix((data, (rows, cols)), shape=(n * m, n * m))


def _reach(graph: csr_matrix, start: int, shape) -> np.ndarray:
    nodes = breadth_first_order(graph, start, directed=True, return_predecessors=False)
    out = np.zeros(shape[0] * shape[1], dtype=bool)
    out[nodes] = True
    return out.reshape(shape)


def reachable_from_source(grid) -> np.ndarray:
    """Cells reachable from (0, 0) by down/right steps over LAND. The grid is not modified."""
    land = as_land_grid(grid)
    return _reach(down_right_graph(land), 0, land.shape)


def reaching_destination(grid) -> np.ndarray:
    """Cells from which the bottom-right cell is reachable by down/right steps over LAND."""
    land = as_land_grid(grid)
    n, m = land.shape
    graph = down_right_graph(land).transpose().tocsr()
    return _reach(graph, n * m - 1, land.shape)


def find_cut_cells(grid) -> List[Index2D]:
    """
    Interior cells that lie on every down/right path.

    A monotone path visits exactly one cell of each anti-diagonal i + j = d,
    so a cell is a cut cell iff it is the only cell on its anti-diagonal that
    is both reachable from the source and able to reach the destination.
    Returns [] when there is no path at all.
    """
    land = as_land_grid(grid)
    n, m = land.shape

    on_path = reachable_from_source(land) & reaching_destination(land)
    if not on_path[-1, -1] or not on_path[0, 0]:
        return []

    cuts: List[Index2D] = []
    for d in range(1, n + m - 2):
        cells = [(i, d - i) for i in range(max(0, d - m + 1), min(n, d + 1)) if on_path[i, d - i]]
        if len(cells) == 1:
            cuts.append(cells[0])
    return cuts


def analyze_cut(grid) -> CutReport:
    """Non-destructive counterpart of is_possible_to_cut_path, with the cut cells listed."""
    land = as_land_grid(grid)
    n, m = land.shape
    if n == 1 and m == 1:
        return CutReport(possible=True, has_path=True, cut_cells=[])

    has_path = bool(reachable_from_source(land)[-1, -1])
    cuts = find_cut_cells(land) if has_path else []
    return CutReport(possible=(not has_path) or bool(cuts), has_path=has_path, cut_cells=cuts)
