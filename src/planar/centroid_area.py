"""
CentroidArea — dimension-aware диспетчер

Единственная точка сопоставления варианта геометрии с ядром. Чистая
функция: без состояния, без I/O, входы не мутируются.

Второе значение результата по варианту:
    Point, MultiPoint, LineString, MultiLineString → 0
    Ring                                          → знаковая площадь (CCW > 0)
    Polygon, MultiPolygon                         → беззнаковая площадь нетто
    Bound                                         → width · height
    Collection                                    → сумма 2D площадей
"""

import logging
from collections.abc import Iterator
from typing import Any

from src.core.domain.geometry import (
    DIM_AREA,
    ORIGIN,
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
from src.planar.kernels import (
    bound_centroid_area,
    combine,
    line_string_centroid,
    multi_line_string_centroid,
    multi_point_centroid,
    multi_polygon_centroid_area,
    polygon_centroid_area,
    ring_centroid_area,
)
from src.planar.results import CentroidArea, WeightedCentroid

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedGeometryError(TypeError):
    """
    Вариант вне замкнутого набора геометрий.

    Ошибка программирования на границе: диспетчер не возвращает
    вводящий в заблуждение центроид для неизвестных типов.
    """

    def __init__(self, geometry: Any):
        self.geometry = geometry
        super().__init__(
            f"Unsupported geometry type: {type(geometry).__name__}. "
            f"Expected one of Point, MultiPoint, LineString, MultiLineString, "
            f"Ring, Polygon, MultiPolygon, Bound, Collection."
        )


# =============================================================================
# DISPATCH
# =============================================================================


def weighted_centroid(geometry: Geometry) -> WeightedCentroid:
    """
    Результат ядра для геометрии: центроид, вес и размерность.

    Args:
        geometry: Геометрия из замкнутого набора вариантов

    Returns:
        WeightedCentroid

    Raises:
        UnsupportedGeometryError: если тип вне набора
    """
    if isinstance(geometry, Point):
        return multi_point_centroid([geometry])
    if isinstance(geometry, MultiPoint):
        return multi_point_centroid(geometry.points)
    if isinstance(geometry, LineString):
        return line_string_centroid(geometry)
    if isinstance(geometry, MultiLineString):
        return multi_line_string_centroid(geometry)
    if isinstance(geometry, Ring):
        return ring_centroid_area(geometry)
    if isinstance(geometry, Polygon):
        return polygon_centroid_area(geometry)
    if isinstance(geometry, MultiPolygon):
        return multi_polygon_centroid_area(geometry)
    if isinstance(geometry, Bound):
        return bound_centroid_area(geometry)
    if isinstance(geometry, Collection):
        return collection_centroid_area(geometry)

    raise UnsupportedGeometryError(geometry)


def _leaf_parts(collection: Collection) -> Iterator[WeightedCentroid]:
    """Результаты ядер для всех не-коллекционных членов (вложенность раскрывается)"""
    for geometry in collection.geometries:
        if isinstance(geometry, Collection):
            yield from _leaf_parts(geometry)
        else:
            yield weighted_centroid(geometry)


def collection_centroid_area(collection: Collection) -> WeightedCentroid:
    """
    Агрегация гетерогенной коллекции по dimension-priority rule.

    Returns:
        WeightedCentroid; вес — сумма 2D площадей, если они есть
    """
    result = combine(_leaf_parts(collection), collection.dimensions())
    logger.debug(
        "Collection of %d members resolved at dimension %d",
        len(collection.geometries),
        result.dimension,
    )
    return result


# =============================================================================
# PUBLIC API
# =============================================================================


def centroid_area(geometry: Geometry | None) -> CentroidArea:
    """
    Центроид и площадь геометрии на плоскости.

    Args:
        geometry: Геометрия из замкнутого набора вариантов или None

    Returns:
        CentroidArea(centroid, area); None и пустые входы → ((0, 0), 0)

    Raises:
        UnsupportedGeometryError: если тип вне набора

    Examples:
        >>> centroid_area(LineString(points=[(0, 0), (3, 4)]))
        CentroidArea(centroid=Point(x=1.5, y=2.0), area=0.0)
    """
    if geometry is None:
        return CentroidArea(centroid=ORIGIN, area=0.0)

    result = weighted_centroid(geometry)
    area = result.weight if result.dimension == DIM_AREA else 0.0
    return CentroidArea(centroid=result.centroid, area=area)
