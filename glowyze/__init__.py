"""Glowyze: personalized skincare-ingredient recommendations."""

__version__ = "0.1.0"
