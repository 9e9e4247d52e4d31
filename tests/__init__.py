"""
Test suite for valuecodecs

Contains:
- tests/unit/          : Unit tests for individual codecs, gateway and contracts
"""
