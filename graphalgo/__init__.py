"""Undirected weighted graphs with traversal, shortest-path and spanning-tree algorithms."""

__version__ = "0.1.0"
__all__ = ["__version__"]