"""Bound kernel: центроид и площадь axis-aligned прямоугольника."""

from src.core.domain.geometry import DIM_AREA, Bound
from src.planar.results import WeightedCentroid


def bound_centroid_area(bound: Bound) -> WeightedCentroid:
    """
    Центроид — середина диагонали, площадь — width · height.

    Вырожденный bound (min == max) → (min, 0).
    """
    if bound.min == bound.max:
        return WeightedCentroid(centroid=bound.min, weight=0.0, dimension=DIM_AREA)

    return WeightedCentroid(
        centroid=bound.center(),
        weight=bound.width() * bound.height(),
        dimension=DIM_AREA,
    )
