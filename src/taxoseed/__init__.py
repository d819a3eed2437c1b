"""taxoseed - seed import and stable serialization of a product taxonomy."""

__version__ = "0.1.0"
