"""HTTP client for the Auth0 management API user listing."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from airsync.adapters.http_resilience import ResilientClient, raise_for_service_status
from airsync.config.auth0 import auth0_base_url
from airsync.domain.errors import PermanentServiceError

from .schema import Auth0User

if TYPE_CHECKING:
    from collections.abc import Callable

    from airsync.config.auth0 import Auth0Config
    from airsync.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

SERVICE_NAME = "auth0"

_USER_PAGE = TypeAdapter(list[Auth0User])


def should_cache_users_page(payload: object) -> bool:
    """Only successful user pages are cached; error bodies are JSON objects."""

    return isinstance(payload, list)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class Auth0UserDirectory:
    config: Auth0Config
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def list_users(self) -> list[Auth0User]:
        return asyncio.run(self._list_users_async())

    async def _list_users_async(self) -> list[Auth0User]:
        users: list[Auth0User] = []
        page = 0
        async with self.client_factory(self.config.resilience) as client:
            while True:
                batch = await self._request_page(client, page=page)
                if not batch:
                    break
                users.extend(batch)
                page += 1
        log.info(f"Fetched {len(users)} Auth0 users in {page} page(s)")
        return users

    async def _request_page(self, client: ResilientClient, *, page: int) -> list[Auth0User]:
        base_url = self.config.resilience.base_url or auth0_base_url(self.config.domain)
        response = await client.get(
            f"{base_url.rstrip('/')}/users",
            params={
                "per_page": self.config.per_page,
                "page": page,
                "sort": "last_login:-1",
            },
            headers={"Authorization": f"Bearer {self.config.token}"},
        )
        raise_for_service_status(response, service=SERVICE_NAME)
        try:
            return _USER_PAGE.validate_json(response.content)
        except ValueError as exc:
            raise PermanentServiceError(
                f"Unexpected Auth0 users payload: {exc}",
                service=SERVICE_NAME,
                status_code=response.status_code,
                body=response.text,
            ) from exc

