# bodas/web/frontend/state/__init__.py
"""Módulo de estado global de la aplicación."""

from .app_context import AppContext, use_api_client, use_app_context, use_frontend_config, use_promotion_source

__all__ = ["AppContext", "use_api_client", "use_app_context", "use_frontend_config", "use_promotion_source"]
