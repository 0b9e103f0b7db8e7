"""Locate the access token in request headers.

Native apps send ``Authorization: Bearer <token>``. The web app keeps the
token in a cookie; older web builds stored it JSON-encoded as a one-element
array (``["<token>"]``), so that form is still accepted.
"""

import json
from typing import Dict, Mapping, Optional
from urllib.parse import unquote

BEARER_PREFIX = "Bearer "


def parse_cookie_header(cookie_header: str) -> Dict[str, str]:
    """Split ``a=1; b=2`` into a dict with URL-decoded values."""
    cookies: Dict[str, str] = {}
    for pair in cookie_header.split(";"):
        key, sep, value = pair.strip().partition("=")
        if not sep or not key.strip():
            continue
        cookies[key.strip()] = unquote(value.strip())
    return cookies


def token_from_cookie_value(value: str) -> str:
    """Unwrap the legacy JSON-array encoding; anything else is the raw token."""
    try:
        parsed = json.loads(value)
    except (ValueError, RecursionError):
        return value
    if isinstance(parsed, list) and parsed and isinstance(parsed[0], str) and parsed[0]:
        return parsed[0]
    return value


def extract_token(headers: Mapping[str, str], cookie_name: str) -> Optional[str]:
    """Return the token from the Authorization header or the auth cookie.

    The header wins when both are present. ``headers`` should be
    case-insensitive (Starlette ``Headers``) or use lowercase keys.
    """
    auth_header = headers.get("authorization")
    if auth_header and auth_header.startswith(BEARER_PREFIX):
        token = auth_header[len(BEARER_PREFIX):].strip()
        if token:
            return token

    cookie_header = headers.get("cookie")
    if not cookie_header:
        return None

    cookie_value = parse_cookie_header(cookie_header).get(cookie_name)
    if not cookie_value:
        return None
    return token_from_cookie_value(cookie_value)
