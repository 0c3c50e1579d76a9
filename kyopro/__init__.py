"""Algorithms and data structures for competitive programming: searching, prefix sums, segment trees, graphs and tree queries."""

__version__ = "0.1.0"