"""Derive auth-login records from Auth0 users."""

from __future__ import annotations

from datetime import UTC
from typing import TYPE_CHECKING

from airsync.domain.entities import AUTH_LOGIN

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from airsync.domain.records import Record

    from .schema import Auth0User


def _utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return value.astimezone(UTC)


def company_for(user: Auth0User, company_domains: Mapping[str, str]) -> str:
    """Company recorded for ``user``: mapped from the e-mail domain, else the profile."""

    _, _, domain = user.email.strip().lower().rpartition("@")
    return company_domains.get(domain, user.company)


def to_auth_login(user: Auth0User, *, company_domains: Mapping[str, str]) -> Record:
    login_provider = user.identities[0].provider if user.identities else ""
    return AUTH_LOGIN.complete(
        {
            "user_id": user.user_id,
            "name": user.name,
            "nickname": user.nickname,
            "username": user.username,
            "email": user.email,
            "email_verified": user.email_verified,
            "picture": user.picture,
            "company": company_for(user, company_domains),
            "blog": user.blog,
            "phone": user.phone_number,
            "phone_verified": user.phone_verified,
            "locale": user.locale,
            "login_provider": login_provider,
            "created_at": _utc(user.created_at),
            "updated_at": _utc(user.updated_at),
            "last_login": _utc(user.last_login),
            "last_ip": user.last_ip,
            "logins_count": user.logins_count,
        }
    )
