"""Normalizer — fit a whole path collection into one square target box.

A single bounding box is computed over the original coordinates of every
record, and a single linear transform (scale, offset, y flip) is applied to
all of them. New paths are built first and assigned afterwards, so a failure
leaves every record untouched.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from app.engine.config import NormalizerConfig
from app.models.records import PathRecord
from app.svg.errors import MalformedPathError
from app.utils.geometry import BoundingBox, collection_bbox, path_points

logger = logging.getLogger(__name__)


class LinearTransform:
    """``x' = (x - min_x) * k``, ``y' = scale - (y - min_y) * k`` (or unflipped)."""

    def __init__(self, box: BoundingBox, scale: float, flip_y: bool = True) -> None:
        self.box = box
        self.scale = scale
        self.flip_y = flip_y
        # A zero-size box only gets moved, never stretched
        self.factor = scale / box.size if box.size > 0 else 1.0

    def apply(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        out = np.empty_like(points)
        out[:, 0] = (points[:, 0] - self.box.min_x) * self.factor
        dy = (points[:, 1] - self.box.min_y) * self.factor
        out[:, 1] = self.scale - dy if self.flip_y else dy
        return out


def _round_array(values: NDArray[np.float64], digits: int) -> NDArray[np.float64]:
    factor = 10**digits
    return np.floor(values * factor + 0.5) / factor


def _record_points(record: PathRecord) -> NDArray[np.float64]:
    coords = record.coordinates()
    if len(coords) % 2:
        raise MalformedPathError(
            f"Path {record.name!r} has an odd number of coordinates ({len(coords)})"
        )
    return path_points(record.path)


def _rebuild(path: Sequence, values: NDArray[np.float64]) -> list:
    flat = iter(values.ravel().tolist())
    return [v if isinstance(v, str) else next(flat) for v in path]


def round_paths(
    records: Sequence[PathRecord],
    scale: float | None = None,
    config: NormalizerConfig | None = None,
) -> Sequence[PathRecord]:
    """Rescale every record in place so the collection fits a ``scale``-sized box.

    ``scale`` falls back to ``config.scale`` (999 by default). Returns ``records``.
    """
    config = config or NormalizerConfig()
    scale = scale or config.scale

    point_sets = [_record_points(r) for r in records]
    box = collection_bbox(point_sets)
    if box is None:
        logger.debug("Normalizer: %d records without coordinates, nothing to scale", len(records))
        return records

    transform = LinearTransform(box, scale, flip_y=config.flip_y)
    new_paths = [
        _rebuild(record.path, _round_array(transform.apply(points), config.precision))
        if len(points)
        else list(record.path)
        for record, points in zip(records, point_sets)
    ]

    for record, path in zip(records, new_paths):
        record.path = path

    logger.info(
        "Normalized %d paths: box %.2f×%.2f → scale %.0f (factor %.4f)",
        len(records),
        box.width,
        box.height,
        scale,
        transform.factor,
    )
    return records
