"""
Core value type, magnitude primitives, and invariants.

This module contains the foundational building blocks of the arbitrary
precision integer: word-level arithmetic, the BigInteger operator surface,
and the known-answer vector contracts.
"""
