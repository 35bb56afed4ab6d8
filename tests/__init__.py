"""
Test suite for the max-plus algebra engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
