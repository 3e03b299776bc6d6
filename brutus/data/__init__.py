"""Bundled word lists."""
