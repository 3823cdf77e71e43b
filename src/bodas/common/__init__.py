# bodas/common/__init__.py
"""Configuración y logging compartidos por los servicios de Bodas."""
