"""
Test suite for primebench

Contains:
- tests/unit/          : Unit tests for individual modules
"""
