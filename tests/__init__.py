"""
Test suite for polydiv

Contains:
- tests/unit/          : Unit tests for individual modules
"""
