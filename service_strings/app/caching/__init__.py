"""
Strings caching package.

Provides the Redis-backed store holding each user's last split/join
response.
"""

from .response_cache import LastResponseCache

__all__ = [
    "LastResponseCache",
]
