from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from airsync.config import (
    ConfigurationError,
    MissingConfigurationError,
    get_airtable_config,
    get_auth0_config,
    get_database_config,
    get_push_filter_rules,
    get_storage_config,
    get_tracking_config,
    parse_mapping,
    require_env_vars,
)
from airsync.config.auth0 import AUTH0_USER_CACHE_TTL_SECONDS, DEFAULT_COMPANY_DOMAINS

if TYPE_CHECKING:
    from pathlib import Path

AIRTABLE_ENV = {
    "AIRTABLE_API_KEY": "keyABC",
    "AIRTABLE_BASE_ID_SHIPMENTS": "appShip",
    "AIRTABLE_BASE_ID_SWAG": "appSwag",
    "AIRTABLE_BASE_ID_CUSTOMER_LEADS": "appLeads",
}


def test_require_env_vars_reports_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FIRST_VAR", raising=False)
    monkeypatch.setenv("SECOND_VAR", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["SECOND_VAR", "FIRST_VAR"])

    assert "FIRST_VAR, SECOND_VAR" in str(exc.value)


def test_parse_mapping() -> None:
    assert parse_mapping("X", "Example.com=@example, other.org = Other ,") == {
        "example.com": "@example",
        "other.org": "Other",
    }
    with pytest.raises(ConfigurationError):
        parse_mapping("X", "no-separator")


def test_airtable_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in AIRTABLE_ENV.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("AIRTABLE_INBOUND_TABLE", "Inbound Test")
    monkeypatch.delenv("AIRTABLE_VIEW", raising=False)

    config = get_airtable_config()

    assert config.tables.outbound_shipments.name == "Outbound"
    assert config.tables.inbound_shipments.name == "Inbound Test"
    assert config.tables.swag_inventory_items.base_id == "appSwag"
    assert config.tables.auth_logins.name == "Auth0 Logins"
    assert config.tables.auth_logins.view == "Grid view"
    assert config.resilience.default_headers == {"Authorization": "Bearer keyABC"}
    assert config.resilience.ratelimit is not None
    assert config.resilience.ratelimit.max_calls == 5


def test_airtable_config_requires_key(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in AIRTABLE_ENV.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv("AIRTABLE_API_KEY")

    with pytest.raises(MissingConfigurationError, match="AIRTABLE_API_KEY"):
        get_airtable_config()


def test_auth0_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH0_DOMAIN", "oxide")
    monkeypatch.setenv("AUTH0_TOKEN", "tok")
    monkeypatch.delenv("AUTH0_COMPANY_DOMAINS", raising=False)

    config = get_auth0_config(cache_predicate=bool)

    assert config.company_domains == DEFAULT_COMPANY_DOMAINS
    assert config.resilience.base_url == "https://oxide.auth0.com/api/v2/"
    assert config.resilience.cache is not None
    assert config.resilience.cache.default_ttl_seconds == AUTH0_USER_CACHE_TTL_SECONDS
    assert config.resilience.cache.should_cache is bool


def test_auth0_company_domains_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH0_DOMAIN", "oxide")
    monkeypatch.setenv("AUTH0_TOKEN", "tok")
    monkeypatch.setenv("AUTH0_COMPANY_DOMAINS", "example.com=@example")

    assert get_auth0_config().company_domains == {"example.com": "@example"}


def test_database_uri_prefers_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")
    monkeypatch.setenv("AIRSYNC_SQL_ECHO", "true")

    database = get_database_config()

    assert database.uri == "sqlite+pysqlite:///:memory:"
    assert database.echo

    monkeypatch.delenv("DATABASE_URI")
    monkeypatch.setenv("AIRSYNC_DATA_DIR", str(tmp_path / "data"))

    assert get_database_config().uri == f"sqlite+pysqlite:///{tmp_path / 'data' / 'airsync.db'}"
    assert get_storage_config().data_dir == tmp_path / "data"


def test_tracking_and_push_rules_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUBLIC_TRACKING_BASE_URL", "https://track.example.com/")
    monkeypatch.setenv("GITHUB_PUSH_BRANCHES", "main, 0042")
    monkeypatch.delenv("GITHUB_PUSH_REPOSITORY", raising=False)

    tracking = get_tracking_config()
    rules = get_push_filter_rules()

    assert tracking.public_tracking_link(carrier="UPS", tracking_number="1Z9") == (
        "https://track.example.com/UPS/1Z9"
    )
    assert rules.repository == "rfd"
    assert rules.branches == frozenset({"main", "0042"})
