"""
Тесты для WeightedPoint аккумулятора

Проверяет:
1. Origin фиксируется первой точкой
2. Взвешенный центроид и отрицательные веса
3. Ассоциативность merge
4. Точность при больших координатах
5. Immutability
"""

import dataclasses

import pytest

from src.core.math import WeightedPoint, cross, segment_length


class TestWeightedPoint:
    """Тесты для WeightedPoint"""

    def test_empty(self) -> None:
        acc = WeightedPoint()
        assert acc.is_empty()
        assert acc.weight == 0

    def test_zero_weight_centroid_raises(self) -> None:
        """Центроид нулевого веса не определён"""
        with pytest.raises(ValueError, match="zero total weight"):
            WeightedPoint().centroid()

        with pytest.raises(ValueError, match="zero total weight"):
            WeightedPoint().add(1, 1, 1.0).add(2, 2, -1.0).centroid()

    def test_first_point_sets_origin(self) -> None:
        """Первая точка задаёт origin и не вносит вклад в суммы"""
        acc = WeightedPoint().add(5.0, -3.0, 2.0)

        assert acc.origin_x == 5.0
        assert acc.origin_y == -3.0
        assert acc.sum_x == 0.0
        assert acc.sum_y == 0.0
        assert acc.weight == 2.0
        assert acc.centroid() == (5.0, -3.0)

    def test_arithmetic_mean(self) -> None:
        acc = WeightedPoint()
        for x, y in [(0, 0), (1, 1.5), (2, 0)]:
            acc = acc.add(x, y)

        assert acc.count == 3
        assert acc.centroid() == (1.0, 0.5)

    def test_weighted_mean(self) -> None:
        acc = WeightedPoint().add(0, 0, 1.0).add(10, 0, 4.0)
        assert acc.centroid() == pytest.approx((8.0, 0.0))

    def test_negative_weight_subtracts(self) -> None:
        """Отрицательный вес (дыра) отталкивает центроид"""
        acc = WeightedPoint().add(2.0, 1.5, 12.0).add(2.5, 1.5, -1.0)

        x, y = acc.centroid()
        assert x == pytest.approx(21.5 / 11.0)
        assert y == 1.5
        assert acc.weight == 11.0

    def test_merge_matches_sequential_adds(self) -> None:
        """merge эквивалентен последовательному add"""
        points = [(1.0, 2.0, 1.0), (3.0, -1.0, 2.0), (-4.0, 0.5, 0.5), (7.0, 7.0, 3.0)]

        sequential = WeightedPoint()
        for x, y, w in points:
            sequential = sequential.add(x, y, w)

        left = WeightedPoint().add(*points[0]).add(*points[1])
        right = WeightedPoint().add(*points[2]).add(*points[3])
        merged = left.merge(right)

        assert merged.count == sequential.count
        assert merged.weight == pytest.approx(sequential.weight)
        assert merged.centroid() == pytest.approx(sequential.centroid())

    def test_merge_is_associative(self) -> None:
        a = WeightedPoint().add(0, 0, 1.0)
        b = WeightedPoint().add(4, 2, 2.0)
        c = WeightedPoint().add(-2, 6, 3.0)

        assert a.merge(b).merge(c).centroid() == pytest.approx(a.merge(b.merge(c)).centroid())

    def test_merge_with_empty(self) -> None:
        acc = WeightedPoint().add(1, 2, 3.0)
        assert acc.merge(WeightedPoint()) is acc
        assert WeightedPoint().merge(acc) is acc

    def test_large_coordinates_are_exact(self) -> None:
        """Recentering: малый разброс при координатах ~1e15"""
        acc = WeightedPoint().add(1e15, 1e15).add(1e15 + 2, 1e15 + 4)
        assert acc.centroid() == (1e15 + 1, 1e15 + 2)

    def test_add_returns_new_instance(self) -> None:
        acc = WeightedPoint()
        updated = acc.add(1, 1)

        assert acc.is_empty()
        assert not updated.is_empty()

    def test_immutable(self) -> None:
        """WeightedPoint должен быть immutable (frozen dataclass)"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            WeightedPoint().weight = 1.0  # type: ignore


class TestVector:
    """Тесты для векторных примитивов"""

    def test_cross_sign(self) -> None:
        """Поворот против часовой стрелки — положительный"""
        assert cross(1.0, 0.0, 0.0, 1.0) == 1.0
        assert cross(0.0, 1.0, 1.0, 0.0) == -1.0
        assert cross(2.0, 2.0, 1.0, 1.0) == 0.0

    def test_segment_length(self) -> None:
        assert segment_length(0.0, 0.0, 3.0, 4.0) == 5.0
        assert segment_length(1.0, 1.0, 1.0, 1.0) == 0.0
