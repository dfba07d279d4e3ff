"""Cache for headers generated by the web service"""

import hashlib

from cachetools import TTLCache

from conf import settings

header_cache = TTLCache(
    maxsize=settings.max_header_caches, ttl=settings.header_cache_duration
)


def get_header_cache_key(data: bytes, *params: object) -> str:
    """Hash the uploaded data together with the conversion parameters"""
    digest = hashlib.sha256(data)
    for param in params:
        digest.update(b"\0" + repr(param).encode())
    return digest.hexdigest()
