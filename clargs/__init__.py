"""Schema-driven command-line argument parsing, with help rendering and two example commands."""

__version__ = "0.1.0"
__all__ = ["schema", "helptext", "parser", "arithmetic", "noschema"]