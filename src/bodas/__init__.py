# bodas/__init__.py
"""Sitio y back office para la organización de bodas."""

__version__ = "0.1.0"
