"""Cardify: split a markdown note into anchored, linked card files."""

__version__ = "0.1.0"
