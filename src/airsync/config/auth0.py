"""Auth0 configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .env import parse_mapping, require_env_vars
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, ShouldCacheHook

AUTH0_USERS_PER_PAGE = 20
AUTH0_USER_CACHE_TTL_SECONDS = 300.0

DEFAULT_COMPANY_DOMAINS: dict[str, str] = {
    "oxidecomputer.com": "@oxidecomputer",
    "oxide.computer": "@oxidecomputer",
    "bench.com": "@bench",
}


@dataclass(frozen=True)
class Auth0Config:
    domain: str
    token: str
    resilience: ResilienceConfig
    # e-mail domain -> company name recorded on the login
    company_domains: dict[str, str] = field(default_factory=dict[str, str])
    per_page: int = AUTH0_USERS_PER_PAGE


def auth0_base_url(domain: str) -> str:
    host = domain if "." in domain else f"{domain}.auth0.com"
    return f"https://{host}/api/v2/"


def get_auth0_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> Auth0Config:
    values = require_env_vars(("AUTH0_DOMAIN", "AUTH0_TOKEN"))
    domain = values["AUTH0_DOMAIN"]
    token = values["AUTH0_TOKEN"]
    raw_domains = os.getenv("AUTH0_COMPANY_DOMAINS")
    company_domains = (
        parse_mapping("AUTH0_COMPANY_DOMAINS", raw_domains)
        if raw_domains is not None
        else dict(DEFAULT_COMPANY_DOMAINS)
    )
    return Auth0Config(
        domain=domain,
        token=token,
        company_domains=company_domains,
        resilience=resilience
        or ResilienceConfig(
            name="auth0",
            base_url=auth0_base_url(domain),
            timeout_seconds=20.0,
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            cache=CacheConfig(
                backend="memory",
                default_ttl_seconds=AUTH0_USER_CACHE_TTL_SECONDS,
                should_cache=cache_predicate,
            ),
        ),
    )
