"""
Test suite for numtower

Contains:
- tests/unit/          : Unit tests for constructions, kernel primitives and isomorphism oracles
"""
