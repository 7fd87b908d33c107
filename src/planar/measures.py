"""
Measures — производные планарные меры

Обёртки над centroid_area и длины/расстояния на плоскости:
- centroid(g): только центроид
- area(g): абсолютная площадь (0 для точек и линий)
- length(g): длина ломаных и периметры площадных геометрий
- distance(p1, p2): евклидово расстояние
"""

from src.core.domain.geometry import (
    Bound,
    Collection,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
)
from src.core.math.vector import segment_length
from src.planar.centroid_area import UnsupportedGeometryError, centroid_area


def centroid(geometry: Geometry | None) -> Point:
    """Центроид геометрии (первый компонент centroid_area)"""
    return centroid_area(geometry).centroid


def area(geometry: Geometry | None) -> float:
    """
    Абсолютная планарная площадь.

    Для Ring знак отбрасывается; для точек и линий — 0.
    """
    return abs(centroid_area(geometry).area)


def distance(p1: Point, p2: Point) -> float:
    """Евклидово расстояние между точками"""
    return segment_length(p1.x, p1.y, p2.x, p2.y)


def _path_length(points: tuple[Point, ...], closed: bool) -> float:
    total = 0.0
    for i in range(len(points) - 1):
        total += distance(points[i], points[i + 1])

    # Неявное замыкание кольца: ребро (pₙ₋₁, p₀)
    if closed and points and points[0] != points[-1]:
        total += distance(points[-1], points[0])

    return total


def length(geometry: Geometry | None) -> float:
    """
    Планарная длина геометрии.

    - Point, MultiPoint → 0
    - LineString → сумма длин отрезков
    - Ring → периметр (замыкающее ребро учитывается и при неявном замыкании,
      в том числе для кольца из двух точек)
    - Polygon → сумма периметров всех колец
    - Bound → 2 · (width + height)
    - MultiLineString, MultiPolygon, Collection → сумма по членам

    Raises:
        UnsupportedGeometryError: если тип вне набора
    """
    if geometry is None:
        return 0.0
    if isinstance(geometry, (Point, MultiPoint)):
        return 0.0
    if isinstance(geometry, LineString):
        return _path_length(geometry.points, closed=False)
    if isinstance(geometry, Ring):
        return _path_length(geometry.points, closed=True)
    if isinstance(geometry, Polygon):
        return sum(length(r) for r in geometry.rings)
    if isinstance(geometry, MultiLineString):
        return sum(length(ls) for ls in geometry.lines)
    if isinstance(geometry, MultiPolygon):
        return sum(length(p) for p in geometry.polygons)
    if isinstance(geometry, Bound):
        return 2.0 * (geometry.width() + geometry.height())
    if isinstance(geometry, Collection):
        return sum(length(g) for g in geometry.geometries)

    raise UnsupportedGeometryError(geometry)
