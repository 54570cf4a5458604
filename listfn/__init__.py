"""Interpreter for lists of natural numbers, composed list functions and composition search."""

__version__ = "0.1.0"