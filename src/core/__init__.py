"""
Core domain models, mathematical primitives, and invariants.

This module contains the arbitrary-precision integer engine: limb
arithmetic, decimal codec, the BigInteger value type and its JSON contract.
"""
