"""Planar — центроид и площадь 2D геометрий в евклидовой плоскости.

Единая точка входа centroid_area(g) → (centroid, area) для всех вариантов
геометрии: точки, ломаные, кольца, полигоны с дырами, bound и
гетерогенные коллекции (dimension-priority rule).
"""

from .centroid_area import (
    UnsupportedGeometryError,
    centroid_area,
    collection_centroid_area,
    weighted_centroid,
)
from .measures import area, centroid, distance, length
from .results import CentroidArea, WeightedCentroid

__all__ = [
    "CentroidArea",
    "WeightedCentroid",
    "UnsupportedGeometryError",
    "centroid_area",
    "collection_centroid_area",
    "weighted_centroid",
    "area",
    "centroid",
    "distance",
    "length",
]
