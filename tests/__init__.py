"""
Test suite for planar centroid/area

Contains:
- tests/unit/          : Unit tests for geometry models, accumulators and planar kernels
"""
