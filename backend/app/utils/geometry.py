"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def size(self) -> float:
        """Larger of width and height."""
        return max(self.width, self.height)


def path_points(path: Sequence[str | float]) -> NDArray[np.float64]:
    """Coordinates of a flat path as an Nx2 array of (x, y).

    Every directive takes an even number of values, so x and y alternate.
    """
    values = [v for v in path if not isinstance(v, str)]
    return np.asarray(values, dtype=np.float64).reshape(-1, 2)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def collection_bbox(point_sets: Iterable[NDArray[np.float64]]) -> BoundingBox | None:
    """Joint bounding box over several point sets; None when there are no points."""
    non_empty = [p for p in point_sets if len(p) > 0]
    if not non_empty:
        return None
    xmin, ymin, xmax, ymax = bbox(np.vstack(non_empty))
    return BoundingBox(min_x=xmin, max_x=xmax, min_y=ymin, max_y=ymax)
