"""Core configuration, auth, and shared infrastructure."""

from alumni_api.core.config import Settings, get_settings
from alumni_api.core.constants import (
    ROLE_ALUMNI,
    ROLE_ADMINISTRATOR,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
from alumni_api.core.auth import (
    verify_password,
    hash_password,
    create_access_token,
    decode_access_token,
)
from alumni_api.core.limiter import limiter

__all__ = [
    "Settings",
    "get_settings",
    "ROLE_ALUMNI",
    "ROLE_ADMINISTRATOR",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_access_token",
    "limiter",
]
