"""
Test suite for atm-banking

Contains:
- tests/unit/          : Unit tests for individual modules
"""
