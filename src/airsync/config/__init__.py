"""Application configuration helpers."""

from __future__ import annotations

from .airtable import AirtableConfig, AirtableTable, AirtableTables, get_airtable_config
from .auth0 import Auth0Config, get_auth0_config
from .env import optional_env_var, parse_mapping, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .github import PushFilterRules, get_push_filter_rules
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config
from .tracking import TrackingConfig, get_tracking_config

__all__ = [
    "AirtableConfig",
    "AirtableTable",
    "AirtableTables",
    "Auth0Config",
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "PushFilterRules",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "TrackingConfig",
    "configure_logging",
    "get_airtable_config",
    "get_auth0_config",
    "get_database_config",
    "get_push_filter_rules",
    "get_storage_config",
    "get_tracking_config",
    "optional_env_var",
    "parse_mapping",
    "require_env_vars",
]
