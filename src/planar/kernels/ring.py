"""
Ring kernel — знаковая площадь и центроид замкнутого кольца

Shoelace-тождества (индексы по модулю k, замыкание неявное):

    2A = Σ (xᵢ·yᵢ₊₁ − xᵢ₊₁·yᵢ)
    Cx = 1/(6A) · Σ (xᵢ + xᵢ₊₁)·(xᵢ·yᵢ₊₁ − xᵢ₊₁·yᵢ)
    Cy = 1/(6A) · Σ (yᵢ + yᵢ₊₁)·(xᵢ·yᵢ₊₁ − xᵢ₊₁·yᵢ)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. CCW → A > 0, CW → A < 0; знак сохраняется в результате
2. Recentering: все произведения считаются в координатах, смещённых к
   первой вершине, центроид переносится обратно. Без этого суммы
   катастрофически теряют точность при |x|, |y| ~ 1e8 и малом кольце.
3. После смещения первая вершина — начало координат, поэтому рёбра,
   инцидентные ей (включая замыкающее), дают нулевой вклад: результат не
   зависит от того, продублирована ли первая вершина в конце.
4. A == 0 (коллинеарные точки, < 3 различных вершин) → среднее вершин
   (без явной замыкающей), вес 0.
"""

import logging

from src.core.domain.geometry import DIM_AREA, ORIGIN, Orientation, Point, Ring
from src.core.math.vector import cross
from src.planar.results import WeightedCentroid

logger = logging.getLogger(__name__)


def ring_centroid_area(ring: Ring) -> WeightedCentroid:
    """
    Знаковая площадь и area-weighted центроид кольца.

    Args:
        ring: Кольцо (замкнутое явно или неявно)

    Returns:
        WeightedCentroid(centroid, signed_area, DIM_AREA)

    Examples:
        >>> square = Ring(points=[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
        >>> ring_centroid_area(square).weight
        1.0
        >>> ring_centroid_area(square.reverse()).weight
        -1.0
    """
    points = ring.points
    if not points:
        return WeightedCentroid.nothing(DIM_AREA)

    origin_x = points[0].x
    origin_y = points[0].y
    area = 0.0
    sum_x = 0.0
    sum_y = 0.0

    # Рёбра (p₀, p₁) и (pₙ₋₁, p₀) опущены: p₀ смещена в начало координат
    for i in range(1, len(points) - 1):
        ax = points[i].x - origin_x
        ay = points[i].y - origin_y
        bx = points[i + 1].x - origin_x
        by = points[i + 1].y - origin_y

        a = cross(ax, ay, bx, by)
        area += a
        sum_x += (ax + bx) * a
        sum_y += (ay + by) * a

    if area == 0:
        logger.debug("Degenerate ring with %d points, using vertex mean", len(points))
        return WeightedCentroid(
            centroid=ring_vertex_mean(ring), weight=0.0, dimension=DIM_AREA
        )

    area /= 2.0
    sum_x /= 6.0 * area
    sum_y /= 6.0 * area

    return WeightedCentroid(
        centroid=Point(x=sum_x + origin_x, y=sum_y + origin_y),
        weight=area,
        dimension=DIM_AREA,
    )


def ring_vertex_mean(ring: Ring) -> Point:
    """
    Арифметическое среднее вершин кольца без явной замыкающей вершины.

    Fallback-точка для вырожденных колец (нулевая площадь).
    """
    points = ring.points
    if not points:
        return ORIGIN

    n = len(points) - 1 if ring.is_closed() else len(points)
    origin_x = points[0].x
    origin_y = points[0].y
    sum_x = 0.0
    sum_y = 0.0
    for i in range(n):
        sum_x += points[i].x - origin_x
        sum_y += points[i].y - origin_y

    return Point(x=sum_x / n + origin_x, y=sum_y / n + origin_y)


def ring_orientation(ring: Ring) -> Orientation:
    """
    Ориентация кольца по знаку shoelace-площади.

    Returns:
        Orientation.CCW (A > 0), Orientation.CW (A < 0),
        Orientation.DEGENERATE (A == 0 или пустое кольцо)
    """
    area = ring_centroid_area(ring).weight
    if area > 0:
        return Orientation.CCW
    if area < 0:
        return Orientation.CW
    return Orientation.DEGENERATE
