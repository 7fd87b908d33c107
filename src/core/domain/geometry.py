"""
Geometry — Планарные геометрические value-объекты

Immutable Pydantic модели для замкнутого набора вариантов геометрии:
Point, MultiPoint, LineString, MultiLineString, Ring, Polygon,
MultiPolygon, Bound, Collection.

Модели НЕ содержат вычислительной логики центроидов/площадей — только
данные и базовые accessors (bound, dimensions, translate, scale).
Все вычисления находятся в src.planar.

Координаты — конечные float (NaN/Inf не санитизируются и пропагируют
арифметически).
"""

from enum import Enum
from typing import Any, Final, TypeVar, Union

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# РАЗМЕРНОСТИ
# =============================================================================

# Внутренняя размерность геометрий (используется в dimension-priority rule)
DIM_POINT: Final[int] = 0
DIM_LINE: Final[int] = 1
DIM_AREA: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class Orientation(str, Enum):
    """Ориентация кольца по знаку площади"""

    CCW = "ccw"
    CW = "cw"
    DEGENERATE = "degenerate"


# =============================================================================
# POINT
# =============================================================================


class Point(BaseModel):
    """
    Точка на плоскости.

    Принимает как keyword-аргументы (x=..., y=...), так и пару (x, y)
    везде, где ожидается Point (например, внутри Ring.points).
    """

    x: float = Field(..., description="Координата X")
    y: float = Field(..., description="Координата Y")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def coerce_pair(cls, data: Any) -> Any:
        """Конверсия пары (x, y) в поля модели"""
        if isinstance(data, (tuple, list)):
            if len(data) != 2:
                raise ValueError(f"Point requires exactly 2 coordinates, got {len(data)}")
            return {"x": data[0], "y": data[1]}
        return data

    def dimensions(self) -> int:
        return DIM_POINT

    def is_empty(self) -> bool:
        return False

    def bound(self) -> "Bound":
        return Bound(min=self, max=self)

    def translate(self, dx: float, dy: float) -> "Point":
        return Point(x=self.x + dx, y=self.y + dy)

    def scale(self, factor: float) -> "Point":
        return Point(x=self.x * factor, y=self.y * factor)


# Начало координат: результат для пустых геометрий
ORIGIN: Final[Point] = Point(x=0.0, y=0.0)


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТИ ТОЧЕК
# =============================================================================


def _bound_of_points(points: tuple[Point, ...]) -> "Bound":
    """Axis-aligned bound набора точек (пустой набор → bound в начале координат)"""
    if not points:
        return Bound(min=ORIGIN, max=ORIGIN)

    min_x = max_x = points[0].x
    min_y = max_y = points[0].y
    for p in points[1:]:
        min_x = min(min_x, p.x)
        max_x = max(max_x, p.x)
        min_y = min(min_y, p.y)
        max_y = max(max_y, p.y)

    return Bound(min=Point(x=min_x, y=min_y), max=Point(x=max_x, y=max_y))


_S = TypeVar("_S", bound="_PointSequence")


class _PointSequence(BaseModel):
    """
    Базовая модель для геометрий, заданных последовательностью точек.

    Позволяет передавать последовательность координат напрямую:
    Ring(points=[(0, 0), (1, 0), (1, 1)]) или, внутри Polygon, просто
    [(0, 0), (1, 0), (1, 1)].
    """

    points: tuple[Point, ...] = Field(default=(), description="Вершины")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def coerce_sequence(cls, data: Any) -> Any:
        if isinstance(data, (tuple, list)):
            return {"points": data}
        return data

    def is_empty(self) -> bool:
        return len(self.points) == 0

    def bound(self) -> "Bound":
        return _bound_of_points(self.points)

    def translate(self: _S, dx: float, dy: float) -> _S:
        return type(self)(points=tuple(p.translate(dx, dy) for p in self.points))

    def scale(self: _S, factor: float) -> _S:
        return type(self)(points=tuple(p.scale(factor) for p in self.points))

    def reverse(self: _S) -> _S:
        """Копия с обратным порядком вершин"""
        return type(self)(points=tuple(reversed(self.points)))

    def __len__(self) -> int:
        return len(self.points)


class MultiPoint(_PointSequence):
    """Конечный упорядоченный набор точек (может быть пустым)"""

    def dimensions(self) -> int:
        return DIM_POINT


class LineString(_PointSequence):
    """Открытая ломаная (может быть пустой или из одной точки)"""

    def dimensions(self) -> int:
        return DIM_LINE


class Ring(_PointSequence):
    """
    Замкнутая граница простого полигона.

    Первая и последняя точки МОГУТ совпадать; если нет — замыкание неявное.
    Ориентация не ограничена: CCW → положительная площадь, CW → отрицательная.
    """

    def dimensions(self) -> int:
        return DIM_AREA

    def is_closed(self) -> bool:
        """Явное замыкание: последняя вершина дублирует первую"""
        return len(self.points) > 1 and self.points[0] == self.points[-1]


# =============================================================================
# СОСТАВНЫЕ ГЕОМЕТРИИ
# =============================================================================


class MultiLineString(BaseModel):
    """Набор ломаных (члены могут быть пустыми)"""

    lines: tuple[LineString, ...] = Field(default=(), description="Ломаные")

    model_config = {"frozen": True}

    def dimensions(self) -> int:
        return DIM_LINE

    def is_empty(self) -> bool:
        return all(ls.is_empty() for ls in self.lines)

    def bound(self) -> "Bound":
        return _merge_bounds([ls for ls in self.lines if not ls.is_empty()])

    def translate(self, dx: float, dy: float) -> "MultiLineString":
        return MultiLineString(lines=tuple(ls.translate(dx, dy) for ls in self.lines))

    def scale(self, factor: float) -> "MultiLineString":
        return MultiLineString(lines=tuple(ls.scale(factor) for ls in self.lines))


class Polygon(BaseModel):
    """
    Полигон: первое кольцо — внешняя граница, остальные — дыры.

    Дыры предполагаются внутри внешнего кольца. Можно передать список колец
    напрямую: MultiPolygon(polygons=[[outer, hole], ...]).
    """

    rings: tuple[Ring, ...] = Field(default=(), description="Внешнее кольцо + дыры")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def coerce_sequence(cls, data: Any) -> Any:
        if isinstance(data, (tuple, list)):
            return {"rings": data}
        return data

    @property
    def outer(self) -> Ring | None:
        return self.rings[0] if self.rings else None

    @property
    def holes(self) -> tuple[Ring, ...]:
        return self.rings[1:]

    def dimensions(self) -> int:
        return DIM_AREA

    def is_empty(self) -> bool:
        return self.outer is None or self.outer.is_empty()

    def bound(self) -> "Bound":
        # Дыры внутри внешнего кольца: bound определяется только им
        if self.outer is None:
            return Bound(min=ORIGIN, max=ORIGIN)
        return self.outer.bound()

    def translate(self, dx: float, dy: float) -> "Polygon":
        return Polygon(rings=tuple(r.translate(dx, dy) for r in self.rings))

    def scale(self, factor: float) -> "Polygon":
        return Polygon(rings=tuple(r.scale(factor) for r in self.rings))


class MultiPolygon(BaseModel):
    """Набор полигонов"""

    polygons: tuple[Polygon, ...] = Field(default=(), description="Полигоны")

    model_config = {"frozen": True}

    def dimensions(self) -> int:
        return DIM_AREA

    def is_empty(self) -> bool:
        return all(p.is_empty() for p in self.polygons)

    def bound(self) -> "Bound":
        return _merge_bounds([p for p in self.polygons if not p.is_empty()])

    def translate(self, dx: float, dy: float) -> "MultiPolygon":
        return MultiPolygon(polygons=tuple(p.translate(dx, dy) for p in self.polygons))

    def scale(self, factor: float) -> "MultiPolygon":
        return MultiPolygon(polygons=tuple(p.scale(factor) for p in self.polygons))


# =============================================================================
# BOUND
# =============================================================================


class Bound(BaseModel):
    """
    Axis-aligned прямоугольник (min, max).

    Инвариант: min.x <= max.x и min.y <= max.y.
    """

    min: Point = Field(..., description="Левый нижний угол")
    max: Point = Field(..., description="Правый верхний угол")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_corners(self) -> "Bound":
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise ValueError(
                f"Bound min {self.min.x, self.min.y} exceeds max {self.max.x, self.max.y}"
            )
        return self

    def dimensions(self) -> int:
        return DIM_AREA

    def is_empty(self) -> bool:
        return False

    def bound(self) -> "Bound":
        return self

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Point:
        return Point(x=(self.min.x + self.max.x) / 2.0, y=(self.min.y + self.max.y) / 2.0)

    def contains(self, point: Point) -> bool:
        """Точка внутри или на границе"""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def union(self, other: "Bound") -> "Bound":
        return Bound(
            min=Point(x=min(self.min.x, other.min.x), y=min(self.min.y, other.min.y)),
            max=Point(x=max(self.max.x, other.max.x), y=max(self.max.y, other.max.y)),
        )

    def to_ring(self) -> Ring:
        """Замкнутое CCW кольцо по углам прямоугольника"""
        return Ring(
            points=(
                self.min,
                Point(x=self.max.x, y=self.min.y),
                self.max,
                Point(x=self.min.x, y=self.max.y),
                self.min,
            )
        )

    def translate(self, dx: float, dy: float) -> "Bound":
        return Bound(min=self.min.translate(dx, dy), max=self.max.translate(dx, dy))

    def scale(self, factor: float) -> "Bound":
        # Отрицательный масштаб меняет углы местами
        a = self.min.scale(factor)
        b = self.max.scale(factor)
        return Bound(
            min=Point(x=min(a.x, b.x), y=min(a.y, b.y)),
            max=Point(x=max(a.x, b.x), y=max(a.y, b.y)),
        )


def _merge_bounds(geometries: list[Any]) -> Bound:
    if not geometries:
        return Bound(min=ORIGIN, max=ORIGIN)

    result = geometries[0].bound()
    for g in geometries[1:]:
        result = result.union(g.bound())
    return result


# =============================================================================
# COLLECTION
# =============================================================================


class Collection(BaseModel):
    """
    Гетерогенный набор геометрий (допускается вложенность).

    Размерность коллекции — максимальная размерность её членов.
    """

    geometries: tuple["Geometry", ...] = Field(default=(), description="Члены коллекции")

    model_config = {"frozen": True}

    def dimensions(self) -> int:
        return max((g.dimensions() for g in self.geometries), default=DIM_POINT)

    def is_empty(self) -> bool:
        return all(g.is_empty() for g in self.geometries)

    def bound(self) -> Bound:
        return _merge_bounds([g for g in self.geometries if not g.is_empty()])

    def translate(self, dx: float, dy: float) -> "Collection":
        return Collection(geometries=tuple(g.translate(dx, dy) for g in self.geometries))

    def scale(self, factor: float) -> "Collection":
        return Collection(geometries=tuple(g.scale(factor) for g in self.geometries))


# Замкнутый набор вариантов
Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Ring,
    Polygon,
    MultiPolygon,
    Bound,
    Collection,
]

Collection.model_rebuild()
