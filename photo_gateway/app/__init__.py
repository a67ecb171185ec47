"""
Photo Gateway Service package.

The gateway proxies photo lookups to a fixed upstream JSON API and keeps
responses in Redis for a fixed TTL (cache-aside).

Structure:
- app.main: FastAPI app, routes, and lifecycle wiring.
- app.adapters: HTTP client for the upstream photos API.
- app.caching: Redis cache store, key builders and the cache-aside helper.
"""
