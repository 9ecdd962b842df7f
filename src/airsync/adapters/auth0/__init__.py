"""Public interface for the Auth0 adapter."""

from __future__ import annotations

from .client import Auth0UserDirectory, should_cache_users_page
from .schema import Auth0Identity, Auth0User
from .translator import company_for, to_auth_login

__all__ = [
    "Auth0Identity",
    "Auth0User",
    "Auth0UserDirectory",
    "company_for",
    "should_cache_users_page",
    "to_auth_login",
]
