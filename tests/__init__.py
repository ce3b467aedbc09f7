"""
Test suite for decimath

Contains:
- tests/unit/          : Unit tests for core primitives, Result and helpers
"""
