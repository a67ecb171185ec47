"""Photo Gateway: a caching HTTP front for the upstream photos API."""
