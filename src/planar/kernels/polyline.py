"""
Polyline kernel — length-weighted центроид ломаных

Каждый отрезок sᵢ вносит свою середину с весом len(sᵢ):

    C = Σ mid(sᵢ) · len(sᵢ) / Σ len(sᵢ)

Площадь одномерного объекта равна 0; длина сохраняется как вес для
агрегации (MultiLineString, Collection).
"""

import logging

from src.core.domain.geometry import DIM_LINE, LineString, MultiLineString, Point
from src.core.math.vector import segment_length
from src.planar.kernels.combine import combine
from src.planar.results import WeightedCentroid

logger = logging.getLogger(__name__)


def line_string_centroid(line: LineString) -> WeightedCentroid:
    """
    Центроид ломаной с длиной в качестве веса.

    Координаты смещаются к первой вершине перед суммированием.

    Args:
        line: Ломаная

    Returns:
        WeightedCentroid(centroid, length, DIM_LINE):
        - пустая → ((0, 0), 0)
        - одна точка или нулевая длина → (первая точка, 0)
    """
    points = line.points
    if not points:
        return WeightedCentroid.nothing(DIM_LINE)

    origin_x = points[0].x
    origin_y = points[0].y
    sum_x = 0.0
    sum_y = 0.0
    length = 0.0

    for i in range(len(points) - 1):
        ax = points[i].x - origin_x
        ay = points[i].y - origin_y
        bx = points[i + 1].x - origin_x
        by = points[i + 1].y - origin_y

        d = segment_length(ax, ay, bx, by)
        sum_x += (ax + bx) / 2.0 * d
        sum_y += (ay + by) / 2.0 * d
        length += d

    if length == 0:
        logger.debug("Zero-length line string with %d points, using first point", len(points))
        return WeightedCentroid(centroid=points[0], weight=0.0, dimension=DIM_LINE)

    return WeightedCentroid(
        centroid=Point(x=sum_x / length + origin_x, y=sum_y / length + origin_y),
        weight=length,
        dimension=DIM_LINE,
    )


def multi_line_string_centroid(lines: MultiLineString) -> WeightedCentroid:
    """
    Length-weighted комбинация центроидов ломаных.

    Пустые ломаные пропускаются. Если у всех непустых ломаных нулевая
    длина, результат — арифметическое среднее их представительных точек.

    Returns:
        WeightedCentroid с суммарной длиной в качестве веса
    """
    return combine((line_string_centroid(line) for line in lines.lines), DIM_LINE)
