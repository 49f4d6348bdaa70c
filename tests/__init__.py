"""
Test suite for flexrational

Contains:
- tests/unit/          : Unit tests for individual modules
"""
