"""Sevens card game simulator: cards, table, strategies and multi-round games."""

__version__ = "0.1.0"