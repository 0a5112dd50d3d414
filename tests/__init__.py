"""
Test suite for bounded

Contains:
- tests/unit/          : Unit tests for core and presets
"""
