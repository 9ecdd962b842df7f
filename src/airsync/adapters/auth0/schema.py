"""Pydantic models describing the Auth0 management API user payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Auth0BaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Auth0Identity(Auth0BaseModel):
    provider: str
    user_id: str | None = None
    connection: str | None = None
    is_social: bool = Field(default=False, alias="isSocial")


class Auth0User(Auth0BaseModel):
    user_id: str
    email: str = ""
    email_verified: bool = False
    username: str = ""
    family_name: str = ""
    given_name: str = ""
    name: str = ""
    nickname: str = ""
    picture: str = ""
    phone_number: str = ""
    phone_verified: bool = False
    locale: str = ""
    identities: list[Auth0Identity] = Field(default_factory=list[Auth0Identity])
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # absent for users who signed up but never logged in
    last_login: datetime | None = None
    last_ip: str = ""
    logins_count: int = 0
    blog: str = ""
    company: str = ""
