"""
Complex numbers as immutable value objects with synchronized Cartesian and
polar representations.

This package is pure computation: no I/O, no shared mutable state.
"""
