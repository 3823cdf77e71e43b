# bodas/web/frontend/api/__init__.py
"""Módulo de cliente API."""

from .api_client import APIClient, clean_query_params, get_api_client
from .data_sources import ApiPromotionSource, InMemoryPromotionSource, PromotionSource
from .resources import ParamSpec, QueryDescriptor, ResourceSchema

__all__ = [
    "APIClient",
    "ApiPromotionSource",
    "InMemoryPromotionSource",
    "ParamSpec",
    "PromotionSource",
    "QueryDescriptor",
    "ResourceSchema",
    "clean_query_params",
    "get_api_client",
]
