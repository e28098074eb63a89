"""
Adapters package for the Strings Service.

Contains HTTP client wrappers for external dependencies. Keep adapters thin
and side-effect free outside of explicit calls.
"""

from .identity_client import IdentityClient

__all__ = [
    "IdentityClient",
]
