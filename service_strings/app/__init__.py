"""
Strings Service package for the String Access Layer.

The service splits strings into odd/even characters and joins them back,
enforcing:
- Authentication: Basic credentials checked with the identity service
- Integrity: SHA-1 body signatures on mutating requests
- Caching: each user's last response kept in Redis

Structure:
- app.main: FastAPI app, routes, and service wiring.
- app.adapters: HTTP client for the identity service.
- app.caching: Redis-backed last-response store.
- app.domain: Auth pipeline, signatures, payload parsing and transforms.
"""
