"""
Test suite for jalali

Contains:
- tests/unit/          : Unit tests for the calendar math, converter, formatter/parser and adapters
"""
