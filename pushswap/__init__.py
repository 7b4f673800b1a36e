"""Two-stack sorting with a restricted operation set, and a checker for it."""

__version__ = "0.1.0"