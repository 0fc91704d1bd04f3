from __future__ import annotations

import src.disconnect_path.config as cfg
from src.disconnect_path.grid import LandGrid, as_land_grid
from src.disconnect_path.probe import probe


def is_possible_to_cut_path(grid) -> bool:
    """
    True if blocking at most one interior cell leaves no down/right path from
    the top-left to the bottom-right cell.

    The first probe wipes out one down/right path (plus every dead end it
    explored). If a second probe still gets through, a path disjoint from the
    first one exists and no single cell can cut both.

    A LandGrid argument is consumed: it is mutated by both probes and its final
    state means nothing. Any other grid-like argument is validated and copied.
    """
    land: LandGrid = as_land_grid(grid)
    n, m = land.shape

    if n == 1 and m == 1:
        return cfg.SINGLE_CELL_CUTTABLE

    probe(cfg.SOURCE, land)

    # both corners back to LAND before the second probe
    land.set_land(*cfg.SOURCE)
    land.set_land(*land.destination)

    return not probe(cfg.SOURCE, land)
