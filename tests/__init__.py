"""Brutus test suite."""
