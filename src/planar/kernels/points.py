"""Point-set kernel: арифметическое среднее конечного набора точек."""

from collections.abc import Sequence

from src.core.domain.geometry import DIM_POINT, Point
from src.planar.results import WeightedCentroid


def multi_point_centroid(points: Sequence[Point]) -> WeightedCentroid:
    """
    Центроид набора точек (площадь 0).

    Суммирование выполняется в координатах, смещённых к первой точке.

    Args:
        points: Точки (может быть пустым)

    Returns:
        WeightedCentroid с весом 0; пустой набор → ((0, 0), 0)

    Examples:
        >>> multi_point_centroid([Point(x=0, y=0), Point(x=2, y=0)]).centroid
        Point(x=1.0, y=0.0)
    """
    n = len(points)
    if n == 0:
        return WeightedCentroid.nothing(DIM_POINT)
    if n == 1:
        return WeightedCentroid(centroid=points[0], weight=0.0, dimension=DIM_POINT)

    origin_x = points[0].x
    origin_y = points[0].y
    sum_x = 0.0
    sum_y = 0.0
    for p in points:
        sum_x += p.x - origin_x
        sum_y += p.y - origin_y

    return WeightedCentroid(
        centroid=Point(x=sum_x / n + origin_x, y=sum_y / n + origin_y),
        weight=0.0,
        dimension=DIM_POINT,
    )
