"""Kernels — per-variant алгоритмы центроида и площади.

- points: арифметическое среднее (0D)
- polyline: length-weighted центроид (1D)
- ring: shoelace с recentering (2D, знаковая площадь)
- polygon: внешнее кольцо минус дыры (2D, беззнаковая площадь)
- bound: axis-aligned прямоугольник
- combine: dimension-priority комбинация составных геометрий
"""

from .bound import bound_centroid_area
from .combine import combine
from .points import multi_point_centroid
from .polygon import multi_polygon_centroid_area, polygon_centroid_area
from .polyline import line_string_centroid, multi_line_string_centroid
from .ring import ring_centroid_area, ring_orientation, ring_vertex_mean

__all__ = [
    "bound_centroid_area",
    "combine",
    "multi_point_centroid",
    "polygon_centroid_area",
    "multi_polygon_centroid_area",
    "line_string_centroid",
    "multi_line_string_centroid",
    "ring_centroid_area",
    "ring_orientation",
    "ring_vertex_mean",
]
