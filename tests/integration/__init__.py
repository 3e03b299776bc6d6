"""Integration tests against real word lists and databases."""
