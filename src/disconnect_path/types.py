from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class CellType(IntEnum):
    """
    Cell tags of a land/water grid:
    0 = water (blocked, or already visited by a probe)
    1 = land (traversable)
    """
    WATER = 0
    LAND = 1


Grid = np.ndarray
Index2D = Tuple[int, int]


class InvalidInputError(ValueError):
    """Grid is empty, ragged, not two-dimensional or holds values other than 0/1."""


@dataclass(frozen=True, slots=True)
class CutReport:
    """
    Result of the non-destructive cut analysis.
    has_path: a down/right path (0,0) -> (rows-1, cols-1) exists
    cut_cells: interior cells lying on every such path
    possible: blocking one interior cell leaves no path (or there is none already)
    """
    possible: bool
    has_path: bool
    cut_cells: List[Index2D] = field(default_factory=list)
