"""
Core domain models and mathematical primitives.

This module contains the foundational building blocks that are independent
of the planar kernels: geometry value shapes and numeric accumulators.
"""
