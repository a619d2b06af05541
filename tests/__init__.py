"""
Test suite for chipcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
