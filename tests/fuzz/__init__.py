"""Fuzz testing infrastructure for intexpr.

This package contains:
- test_parser_depth_exhaustion: Boundary testing for nesting depth limits

Python 3.13+.
"""
