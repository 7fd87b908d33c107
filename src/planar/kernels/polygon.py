"""
Polygon combiner — внешнее кольцо минус дыры

Центроид полигона — взвешенное по площади среднее центроидов колец:

    C = Σ (Aᵢ · Cᵢ) / Σ Aᵢ

где внешнее кольцо входит с +|A₀|, а каждая дыра с −|Aₕ|. Ориентация
колец нормализуется: дыра вычитается независимо от направления обхода.
Возвращаемая площадь беззнаковая: |Σ Aᵢ|.
"""

import logging

from src.core.domain.geometry import DIM_AREA, MultiPolygon, Point, Polygon
from src.core.math.accumulator import WeightedPoint
from src.planar.kernels.combine import combine
from src.planar.kernels.ring import ring_centroid_area, ring_vertex_mean
from src.planar.results import WeightedCentroid

logger = logging.getLogger(__name__)


def polygon_centroid_area(polygon: Polygon) -> WeightedCentroid:
    """
    Центроид и беззнаковая площадь полигона с дырами.

    Args:
        polygon: Полигон (первое кольцо — внешнее)

    Returns:
        WeightedCentroid(centroid, |net_area|, DIM_AREA):
        - нет колец или пустое внешнее кольцо → ((0, 0), 0)
        - вырожденное внешнее кольцо или нулевая итоговая площадь →
          (среднее вершин внешнего кольца, 0)
    """
    outer_ring = polygon.outer
    if outer_ring is None or outer_ring.is_empty():
        return WeightedCentroid.nothing(DIM_AREA)

    outer = ring_centroid_area(outer_ring)
    outer_area = abs(outer.weight)

    if outer_area == 0:
        # Вырожденная внешняя граница: дыры не вносят вклада
        if polygon.holes:
            logger.debug(
                "Degenerate outer ring with %d holes, using outer vertex mean",
                len(polygon.holes),
            )
        return WeightedCentroid(centroid=outer.centroid, weight=0.0, dimension=DIM_AREA)

    if not polygon.holes:
        return WeightedCentroid(centroid=outer.centroid, weight=outer_area, dimension=DIM_AREA)

    acc = WeightedPoint().add(outer.centroid.x, outer.centroid.y, outer_area)
    for ring in polygon.holes:
        hole = ring_centroid_area(ring)
        if hole.empty:
            continue
        acc = acc.add(hole.centroid.x, hole.centroid.y, -abs(hole.weight))

    if acc.weight == 0:
        logger.debug(
            "Polygon with %d holes has zero net area, using outer vertex mean",
            len(polygon.holes),
        )
        return WeightedCentroid(
            centroid=ring_vertex_mean(outer_ring), weight=0.0, dimension=DIM_AREA
        )

    x, y = acc.centroid()
    return WeightedCentroid(centroid=Point(x=x, y=y), weight=abs(acc.weight), dimension=DIM_AREA)


def multi_polygon_centroid_area(polygons: MultiPolygon) -> WeightedCentroid:
    """
    Area-weighted комбинация полигонов.

    Нулевая суммарная площадь → среднее представительных точек полигонов.
    """
    return combine((polygon_centroid_area(p) for p in polygons.polygons), DIM_AREA)
