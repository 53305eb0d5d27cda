"""Bundled data files for bitctl."""
