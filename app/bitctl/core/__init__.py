"""Core search engine, configuration and storage for bitctl."""
