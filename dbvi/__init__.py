"""dbvi - A modal terminal client for SQL databases."""

__version__ = "0.1.0"
