"""
Test suite for tempconv

Contains:
- tests/unit/          : Unit tests for individual modules
"""
