"""Generate MongoDB shell queries from simple SQL statements."""

__version__ = "0.1.0"
__all__ = ["cli", "converter", "generator", "mongo", "parser", "sql"]