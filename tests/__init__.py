"""
Test suite for bigint

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/vectors/       : Known-answer vector files (JSON)
"""
