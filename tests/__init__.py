"""
Test suite for malg

Contains:
- tests/unit/          : Unit tests for individual modules
"""
