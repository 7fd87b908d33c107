"""
Domain models and value objects.

Contains the planar geometry value shapes consumed by src.planar:
Point, MultiPoint, LineString, MultiLineString, Ring, Polygon,
MultiPolygon, Bound, Collection.
"""

from src.core.domain.geometry import (
    DIM_AREA,
    DIM_LINE,
    DIM_POINT,
    ORIGIN,
    Bound,
    Collection,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Orientation,
    Point,
    Polygon,
    Ring,
)

__all__ = [
    # Dimensions
    "DIM_POINT",
    "DIM_LINE",
    "DIM_AREA",
    "ORIGIN",
    # Enums
    "Orientation",
    # Geometry models
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Ring",
    "Polygon",
    "MultiPolygon",
    "Bound",
    "Collection",
    "Geometry",
]
