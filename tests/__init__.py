"""
Test suite for bignums

Contains:
- tests/unit/          : Unit tests for coercion, chains, contracts, runner
"""
