"""
Strings service: split/join transforms behind Basic auth and body signatures.

Example, with ``signature`` the SHA-1 hex digest of the exact body sent::

    curl -X POST -u USER:PASS \\
        'http://localhost:8000/split?signature=04e74f3b8cfcf0b502ff701a9b5f0b98ece0d3b4' \\
        -d '{"string":"split me"}'
    {"odd":["s","l","t","m"],"even":["p","i"," ","e"]}

    curl -u USER:PASS http://localhost:8000/lastResponse
    {"odd":["s","l","t","m"],"even":["p","i"," ","e"]}
"""

from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.security import HTTPBasicCredentials

from shared.base_service import BaseService
from .adapters.identity_client import IdentityClient
from .caching.response_cache import LastResponseCache
from .domain.auth_middleware import AuthMiddleware
from .domain.payload import parse_body, require_char_lists, require_string
from .domain.transform import join_halves, split_string


class StringsService(BaseService):
    """Strings service implementation."""

    def __init__(
        self,
        identity_client: Optional[IdentityClient] = None,
        cache: Optional[LastResponseCache] = None,
        **config_overrides,
    ):
        super().__init__("strings", 8000, **config_overrides)
        self.identity_client = identity_client or IdentityClient(
            self.config.identity_service_url,
            timeout=self.config.identity_timeout_seconds,
            metrics=self.metrics,
        )
        self.cache = cache or LastResponseCache(
            self.config.redis_url,
            key_prefix=self.config.cache_key_prefix,
            ttl_seconds=self.config.cache_ttl_seconds,
            metrics=self.metrics,
        )
        self.auth_middleware = AuthMiddleware(self.identity_client, metrics=self.metrics)

        @self.app.on_event("shutdown")
        async def _shutdown():
            await self.cache.stop()

        self._setup_strings_routes()

        self.app.state.strings_service = self

    async def _check_dependencies(self):
        return {"cache": "ok" if await self.cache.health_check() else "error"}

    def _setup_strings_routes(self):
        """Set up split/join/lastResponse routes."""
        security = self.auth_middleware.security

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "strings",
                "message": "String Access Layer - Strings Service",
                "version": "1.0.0"
            }

        @self.app.post("/split")
        async def split(
            request: Request,
            signature: Optional[str] = Query(None),
            credentials: Optional[HTTPBasicCredentials] = Depends(security),
        ):
            """Split ``string`` into characters at odd and even positions."""
            self.auth_middleware.require_credentials(credentials)
            raw_body = await request.body()
            params = parse_body(raw_body, request.headers.get("content-type", ""))
            value = require_string(params, "string")

            username = await self.auth_middleware.authenticate_request(
                credentials, raw_body, signature, require_signature=True
            )

            response = split_string(value).model_dump()
            await self.cache.set(username, response)
            return response

        @self.app.post("/join")
        async def join(
            request: Request,
            signature: Optional[str] = Query(None),
            credentials: Optional[HTTPBasicCredentials] = Depends(security),
        ):
            """Interleave ``odd`` and ``even`` back into a string."""
            self.auth_middleware.require_credentials(credentials)
            raw_body = await request.body()
            params = parse_body(raw_body, request.headers.get("content-type", ""))
            odd, even = require_char_lists(params, "odd", "even")

            username = await self.auth_middleware.authenticate_request(
                credentials, raw_body, signature, require_signature=True
            )

            response = join_halves(odd, even).model_dump()
            await self.cache.set(username, response)
            return response

        @self.app.get("/lastResponse")
        async def last_response(
            credentials: Optional[HTTPBasicCredentials] = Depends(security),
        ):
            """Return the caller's last split/join response, or null."""
            username = await self.auth_middleware.authenticate_request(credentials)
            return await self.cache.get(username)


def create_app(**kwargs) -> FastAPI:
    """Create strings service application."""
    service = StringsService(**kwargs)
    return service.app


if __name__ == "__main__":
    StringsService().run()
