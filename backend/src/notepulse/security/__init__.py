"""Security utilities."""

from .credentials import extract_token, parse_cookie_header
from .jwt import TokenVerifier, create_access_token, seconds_until_expiry

__all__ = [
    "extract_token",
    "parse_cookie_header",
    "TokenVerifier",
    "create_access_token",
    "seconds_until_expiry",
]
