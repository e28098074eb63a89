"""
Authentication pipeline for the strings service.
"""

import base64
from fastapi import Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param
from typing import Optional, Union

from shared.logging import get_logger, set_user_context
from shared.errors import AuthenticationError, SignatureError
from shared.metrics import MetricsCollector
from ..adapters.identity_client import IdentityClient
from .signature import is_valid_signature


class BasicCredentials(HTTPBasic):
    """HTTP Basic extractor that decodes the token as UTF-8.

    Returns None when no Basic header is present; a header that does not
    decode to ``username:password`` raises AuthenticationError.
    """

    async def __call__(self, request: Request) -> Optional[HTTPBasicCredentials]:
        authorization = request.headers.get("Authorization")
        scheme, param = get_authorization_scheme_param(authorization)
        if not authorization or scheme.lower() != "basic":
            return None

        try:
            data = base64.b64decode(param, validate=True).decode("utf-8")
        except ValueError as e:
            raise AuthenticationError("Invalid authentication credentials") from e

        username, separator, password = data.partition(":")
        if not separator:
            raise AuthenticationError("Invalid authentication credentials")
        return HTTPBasicCredentials(username=username, password=password)


class AuthMiddleware:
    """Checks Basic credentials against the identity service and verifies signatures."""

    def __init__(self, identity_client: IdentityClient, metrics: Optional[MetricsCollector] = None):
        self.identity_client = identity_client
        self.metrics = metrics
        self.logger = get_logger("strings.auth_middleware")
        # Credentials are extracted here and checked in the handlers
        self.security = BasicCredentials(auto_error=False)

    def require_credentials(self, credentials: Optional[HTTPBasicCredentials]) -> HTTPBasicCredentials:
        """Reject requests that carry no Basic credentials at all."""
        if credentials is None or not credentials.username:
            raise AuthenticationError("Authentication required")
        return credentials

    async def authenticate_request(
        self,
        credentials: Optional[HTTPBasicCredentials],
        raw_body: Union[bytes, str] = b"",
        signature: Optional[str] = None,
        require_signature: bool = False,
    ) -> str:
        """Validate the user, then the signature; return the username.

        Raises AuthenticationError (401) before SignatureError (403).
        """
        credentials = self.require_credentials(credentials)

        if not await self.identity_client.is_valid_user(credentials.username, credentials.password):
            raise AuthenticationError("Invalid user")

        set_user_context(credentials.username)

        if not is_valid_signature(raw_body, signature, require_signature):
            self.logger.warning("Signature check failed", signature_supplied=bool(signature))
            self._record_signature("invalid")
            raise SignatureError()

        self._record_signature("valid")
        return credentials.username

    def _record_signature(self, result: str) -> None:
        if self.metrics:
            self.metrics.increment_counter("signature_checks_total", result=result)
