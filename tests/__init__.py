"""
Test suite for bignum

Contains:
- tests/unit/          : Unit and property-based tests for core and calculator modules
"""
