"""A small explicitly typed functional language core."""

__version__ = "0.1.0"
