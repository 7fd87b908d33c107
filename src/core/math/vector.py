"""
Vector — Планарные векторные примитивы

Скалярные операции над парами координат без аллокаций:
используются во внутренних циклах ring/polyline ядер.
"""

import math


def cross(ax: float, ay: float, bx: float, by: float) -> float:
    """
    Псевдоскалярное (2D cross) произведение a × b.

    Для смещённых к origin вершин pᵢ, pᵢ₊₁ равно удвоенной знаковой
    площади треугольника (origin, pᵢ, pᵢ₊₁) — слагаемое shoelace-суммы.

    Examples:
        >>> cross(1.0, 0.0, 0.0, 1.0)
        1.0
        >>> cross(0.0, 1.0, 1.0, 0.0)
        -1.0
    """
    return ax * by - bx * ay


def segment_length(ax: float, ay: float, bx: float, by: float) -> float:
    """
    Евклидова длина отрезка.

    Examples:
        >>> segment_length(0.0, 0.0, 3.0, 4.0)
        5.0
    """
    return math.hypot(bx - ax, by - ay)
