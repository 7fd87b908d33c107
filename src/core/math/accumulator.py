"""
WeightedPoint — Ассоциативный аккумулятор взвешенных точек

Центральный алгебраический примитив для комбинации центроидов:
ring, polyline, multi-* и collection ядра сводятся к слиянию аккумуляторов.

Аккумулятор хранит (Σ dx·w, Σ dy·w, Σ w) в координатах, смещённых к
собственному началу отсчёта (origin). Origin фиксируется первой добавленной
точкой — это то же recentering, что и в shoelace-ядре: при больших
координатах (~1e8 и более) и малом разбросе суммы остаются точными.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable: add/merge возвращают новый экземпляр
2. merge ассоциативен (с точностью до округления)
3. centroid() = origin + Σ(d·w) / Σw; при Σw == 0 → ValueError
4. Веса могут быть отрицательными (дыры полигонов)
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class WeightedPoint:
    """
    Аккумулятор (x·w, y·w, w) с recentering.

    Attributes:
        origin_x: X начала отсчёта (первая добавленная точка)
        origin_y: Y начала отсчёта
        sum_x: Σ (x - origin_x) · w
        sum_y: Σ (y - origin_y) · w
        weight: Σ w
        count: количество добавленных точек (включая с нулевым весом)
    """

    origin_x: float = 0.0
    origin_y: float = 0.0
    sum_x: float = 0.0
    sum_y: float = 0.0
    weight: float = 0.0
    count: int = 0

    def is_empty(self) -> bool:
        return self.count == 0

    def add(self, x: float, y: float, weight: float = 1.0) -> "WeightedPoint":
        """
        Добавление точки с весом.

        Args:
            x: Координата X
            y: Координата Y
            weight: Вес (count, длина или знаковая площадь)

        Returns:
            Новый аккумулятор
        """
        if self.count == 0:
            # Первая точка задаёт origin: её вклад в суммы равен нулю
            return WeightedPoint(
                origin_x=x,
                origin_y=y,
                sum_x=0.0,
                sum_y=0.0,
                weight=weight,
                count=1,
            )

        return replace(
            self,
            sum_x=self.sum_x + (x - self.origin_x) * weight,
            sum_y=self.sum_y + (y - self.origin_y) * weight,
            weight=self.weight + weight,
            count=self.count + 1,
        )

    def merge(self, other: "WeightedPoint") -> "WeightedPoint":
        """
        Слияние двух аккумуляторов.

        Суммы other пересчитываются к origin self:
            Σ (p - o₁)·w = Σ (p - o₂)·w + (o₂ - o₁)·Σw
        """
        if other.count == 0:
            return self
        if self.count == 0:
            return other

        shift_x = other.origin_x - self.origin_x
        shift_y = other.origin_y - self.origin_y

        return replace(
            self,
            sum_x=self.sum_x + other.sum_x + shift_x * other.weight,
            sum_y=self.sum_y + other.sum_y + shift_y * other.weight,
            weight=self.weight + other.weight,
            count=self.count + other.count,
        )

    def centroid(self) -> tuple[float, float]:
        """
        Взвешенный центроид.

        Returns:
            (x, y) в исходных координатах

        Raises:
            ValueError: если суммарный вес равен нулю
        """
        if self.weight == 0:
            raise ValueError(
                f"Cannot compute centroid of zero total weight ({self.count} points)"
            )

        return (
            self.sum_x / self.weight + self.origin_x,
            self.sum_y / self.weight + self.origin_y,
        )
