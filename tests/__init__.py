"""
Test suite for complexible

Contains:
- tests/unit/          : Unit tests for individual modules
"""
