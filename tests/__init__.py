"""
Test suite for arken-math

Contains:
- tests/unit/          : Unit tests for limbs, decimal codec, BigInteger, contracts, CLI
"""
