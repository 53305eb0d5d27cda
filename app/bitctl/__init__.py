"""bitctl - search and bulk-toggle bash-it components."""

__version__ = "0.1.0"
