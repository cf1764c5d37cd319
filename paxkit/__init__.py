"""Chained comparisons, sequence views, newline-aware text helpers and a lazily sorted container."""

__version__ = "0.1.0"
__all__ = ["comparison", "ordered", "sequences", "text"]