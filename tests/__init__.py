"""
Test suite for budget-costing-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
