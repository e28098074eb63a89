"""
Mock identity server answering username/password checks.
"""

from typing import Dict, Optional
from fastapi import FastAPI, Query

from shared.logging import get_logger
from shared.test_helpers import create_test_users


class MockIdentityServer:
    """Mock identity server implementation.

    ``GET /auth?username=..&password=..`` returns ``{"user_id": ...}`` for a
    known pair and an empty object otherwise, always with status 200.
    """

    def __init__(self, port: int = 8080, users: Optional[Dict[str, Dict[str, str]]] = None):
        self.port = port
        self.logger = get_logger("mock.identity")
        self.app = FastAPI(title="Mock Identity", version="1.0.0")

        # username -> {"password": ..., "user_id": ...}
        self.users = users if users is not None else {
            user.username: {"password": user.password, "user_id": user.user_id}
            for user in create_test_users().values()
        }

        self._setup_routes()

    def _setup_routes(self):
        """Set up mock identity routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "mock-identity",
                "message": "Mock identity server for the String Access Layer",
                "version": "1.0.0"
            }

        @self.app.get("/auth")
        async def authenticate(
            username: Optional[str] = Query(None),
            password: Optional[str] = Query(None)
        ):
            """Credential check endpoint."""
            user = self.users.get(username or "")
            if not user or user["password"] != password:
                self.logger.info("Rejected credentials", username=username)
                return {}

            return {"user_id": user["user_id"]}


def create_app():
    """Create mock identity application."""
    server = MockIdentityServer()
    return server.app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8080)
