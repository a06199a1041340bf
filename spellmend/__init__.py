"""Reflow documentation comments and present spelling suggestions."""

__version__ = "0.1.0"
__all__ = ["display", "reflow", "suggestion", "tinhat", "tokens"]