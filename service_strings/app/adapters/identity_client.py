"""
Identity service client for the strings service.
"""

import httpx
from typing import Any, Optional

from shared.logging import get_logger
from shared.metrics import MetricsCollector


class IdentityClient:
    """Client for checking username/password pairs with the identity service.

    The identity endpoint answers ``GET <url>?username=..&password=..`` with a
    JSON object carrying ``user_id`` when the credentials are valid. Only the
    body is inspected; the HTTP status code is ignored.
    """

    def __init__(
        self,
        identity_service_url: str,
        timeout: float = 10.0,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.identity_service_url = identity_service_url
        self.timeout = timeout
        self.metrics = metrics
        self.logger = get_logger("strings.identity_client")

    async def is_valid_user(self, username: str, password: str) -> bool:
        """Return True iff the identity service reports a user id for the credentials."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.identity_service_url,
                    params={"username": username, "password": password}
                )
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.warning("Identity service unreachable", username=username, error=str(e))
            self._record("unavailable")
            return False
        except ValueError as e:
            self.logger.warning("Identity service returned a non-JSON body", username=username, error=str(e))
            self._record("invalid_response")
            return False

        if not _has_user_id(payload):
            self.logger.info("Identity check rejected credentials", username=username)
            self._record("rejected")
            return False

        self._record("accepted")
        return True

    def _record(self, result: str) -> None:
        if self.metrics:
            self.metrics.increment_counter("identity_checks_total", result=result)


def _has_user_id(payload: Any) -> bool:
    return isinstance(payload, dict) and bool(payload.get("user_id"))
