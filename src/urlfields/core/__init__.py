"""Core machinery: URL decomposition and logging setup."""
