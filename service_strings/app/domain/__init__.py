"""
Domain utilities for the Strings Service.

Includes the request authentication pipeline, body signatures, payload
parsing and the split/join transforms.
"""

from .auth_middleware import AuthMiddleware, BasicCredentials

__all__ = [
    "AuthMiddleware",
    "BasicCredentials",
]
