"""
Combine — dimension-priority комбинация взвешенных центроидов

Правило "побеждает старшая присутствующая размерность":
1. Есть элементы с ненулевой 2D площадью → area-weighted среднее их
   центроидов; вес = сумма |площадей|
2. Иначе есть элементы с ненулевой длиной → length-weighted среднее 1D
   центроидов; вес = суммарная длина
3. Иначе → арифметическое среднее представительных точек; вес 0

Элементы младших размерностей игнорируются при наличии старших: полигон
не "размывается" прикреплёнными к коллекции точками. Элементы с нулевым
весом (линии нулевой длины, вырожденные кольца) считаются представительными
точками уровня 3. Пустые элементы не вносят вклада.

Используется MultiLineString, MultiPolygon и Collection ядрами.
"""

import logging
from collections.abc import Iterable

from src.core.domain.geometry import DIM_AREA, DIM_LINE, DIM_POINT, Point
from src.core.math.accumulator import WeightedPoint
from src.planar.results import WeightedCentroid

logger = logging.getLogger(__name__)


def combine(
    parts: Iterable[WeightedCentroid],
    dimension: int = DIM_POINT,
) -> WeightedCentroid:
    """
    Комбинация результатов ядер по dimension-priority rule.

    Args:
        parts: Результаты ядер для членов составной геометрии
        dimension: Размерность результата для пустого и вырожденного
            (уровень 3) случаев

    Returns:
        WeightedCentroid; нет непустых элементов → ((0, 0), 0)
    """
    areas = WeightedPoint()
    lines = WeightedPoint()
    representatives = WeightedPoint()

    for part in parts:
        if part.empty:
            continue

        c = part.centroid
        if part.dimension == DIM_AREA and part.weight != 0:
            # Знак площади кольца не влияет на вклад в коллекцию
            areas = areas.add(c.x, c.y, abs(part.weight))
        elif part.dimension == DIM_LINE and part.weight != 0:
            lines = lines.add(c.x, c.y, part.weight)
        else:
            representatives = representatives.add(c.x, c.y)

    if not areas.is_empty():
        return _from_accumulator(areas, DIM_AREA)

    if not lines.is_empty():
        return _from_accumulator(lines, DIM_LINE)

    if not representatives.is_empty():
        logger.debug(
            "No weighted members, averaging %d representative points",
            representatives.count,
        )
        result = _from_accumulator(representatives, dimension)
        return WeightedCentroid(centroid=result.centroid, weight=0.0, dimension=dimension)

    return WeightedCentroid.nothing(dimension)


def _from_accumulator(acc: WeightedPoint, dimension: int) -> WeightedCentroid:
    if acc.count == 1:
        # Единственный член: центроид без round-trip через x·w / w
        return WeightedCentroid(
            centroid=Point(x=acc.origin_x, y=acc.origin_y),
            weight=acc.weight,
            dimension=dimension,
        )

    x, y = acc.centroid()
    return WeightedCentroid(centroid=Point(x=x, y=y), weight=acc.weight, dimension=dimension)
