"""Clone type classification of method pairs."""

__version__ = "0.1.0"
