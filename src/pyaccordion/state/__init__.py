"""State/store layer.

This package is the single source of truth for accordion item state:
which items exist, which are expanded, and which one holds focus.
"""
