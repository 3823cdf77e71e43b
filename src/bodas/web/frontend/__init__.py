# bodas/web/frontend/__init__.py
"""Interfaz ReactPy y runtime de datos del cliente."""
