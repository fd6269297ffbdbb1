"""
Test suite for the matrix calculator core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
