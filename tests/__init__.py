"""
Test suite for humanize-formatters

Contains:
- tests/unit/          : Unit tests for individual modules
"""
