"""
Adapters package for the Gateway Service.

Contains the HTTP client wrapper for the upstream photos API. Adapters
encapsulate base URLs, timeouts and the mapping of transport failures onto
shared errors. Keep adapters thin and side-effect free outside of explicit
calls.
"""

from .photos_client import PhotosClient

__all__ = ["PhotosClient"]
