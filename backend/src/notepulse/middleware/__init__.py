"""Middleware for authentication and other cross-cutting concerns."""

from .auth import AuthGate, get_current_user, resolve_identity, with_auth

__all__ = ["AuthGate", "get_current_user", "resolve_identity", "with_auth"]
