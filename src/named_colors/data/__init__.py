"""Bundled color tables."""
