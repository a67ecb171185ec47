"""
Cache key builders for gateway routes.

Keys embed caller-supplied values verbatim; callers bound their length with
``fits_key_budget`` before touching the store.
"""

from typing import Optional, Union

PHOTOS_PREFIX = "photos"


def photos_list_key(album_id: Optional[str] = None) -> str:
    """Key for the photo list, optionally filtered by album."""
    if album_id:
        return f"{PHOTOS_PREFIX}?albumId={album_id}"
    return PHOTOS_PREFIX


def photo_key(photo_id: Union[str, int]) -> str:
    """Key for a single photo."""
    return f"{PHOTOS_PREFIX}:{photo_id}"


def fits_key_budget(key: str, max_length: Optional[int]) -> bool:
    if max_length is None:
        return True
    return len(key) <= max_length
