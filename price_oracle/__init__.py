"""Single-writer price oracle store."""

__version__ = "1.0.0"
