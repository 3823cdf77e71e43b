# bodas/web/__init__.py
"""Servicio web de Bodas: interfaz ReactPy servida con FastAPI."""
