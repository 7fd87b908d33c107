"""
Результаты planar-ядер

- CentroidArea: публичный контракт (centroid, area), распаковывается как пара
- WeightedCentroid: внутренний результат ядра с весом и размерностью,
  используемый для комбинации (multi-*, collection)
"""

from dataclasses import dataclass
from typing import NamedTuple

from src.core.domain.geometry import ORIGIN, Point


class CentroidArea(NamedTuple):
    """
    Результат centroid_area.

    Attributes:
        centroid: Представительная точка геометрии
        area: Знаковая площадь (Ring), беззнаковая (Polygon, MultiPolygon,
            Bound, Collection) или 0 (точки и линии)
    """

    centroid: Point
    area: float


@dataclass(frozen=True)
class WeightedCentroid:
    """
    Центроид с весом в собственной размерности.

    Attributes:
        centroid: Представительная точка
        weight: Мера геометрии: 0 для точек, длина для линий,
            площадь для площадных (знаковая для Ring)
        dimension: Внутренняя размерность результата (0, 1, 2)
        empty: True если геометрия пуста и не вносит вклада в комбинации
    """

    centroid: Point
    weight: float
    dimension: int
    empty: bool = False

    @classmethod
    def nothing(cls, dimension: int) -> "WeightedCentroid":
        """Результат для пустой геометрии: ((0, 0), 0)"""
        return cls(centroid=ORIGIN, weight=0.0, dimension=dimension, empty=True)
