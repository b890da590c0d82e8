"""
Test suite for tukey-fences

Contains:
- tests/unit/          : Unit tests for individual modules
"""
