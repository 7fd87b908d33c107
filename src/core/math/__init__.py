"""
Core math modules

Математические примитивы с recentering для численной устойчивости.
"""

# Weighted point accumulator
from src.core.math.accumulator import WeightedPoint

# Planar vector primitives
from src.core.math.vector import cross, segment_length

__all__ = [
    "WeightedPoint",
    "cross",
    "segment_length",
]
