"""Recognisers for small regular and context-free languages, with a command line front end."""

__version__ = "0.1.0"
__all__ = ["prefix", "counting", "patterns", "cli"]