"""Algorithms and data structures: number theory, range queries, graphs,
trees, geometry and string hashing."""

__version__ = "0.1.0"