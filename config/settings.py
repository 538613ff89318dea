"""Centralised configuration handling for the Aura Gold console."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://aura-1jkg.onrender.com"
DEFAULT_POLL_INTERVAL_SECONDS = 10.0

# secrets.toml [api] key -> Settings field
_SECRET_KEYS = {
    "base_url": "api_base_url",
    "AURA_API_BASE_URL": "api_base_url",
    "timeout": "request_timeout_seconds",
    "poll_interval": "poll_interval_seconds",
    "log_level": "log_level",
}


def _secrets_overrides(section_name: str = "api") -> dict[str, Any]:
    """Map the ``[api]`` block of ``secrets.toml`` onto settings fields."""

    try:
        section: Mapping[str, Any] = st.secrets.get(section_name) or {}
    except FileNotFoundError:  # no secrets.toml outside `streamlit run`
        return {}

    overrides: dict[str, Any] = {}
    for key, field_name in _SECRET_KEYS.items():
        value = section.get(key)
        if value is not None:
            overrides.setdefault(field_name, value)
    return overrides


class Settings(BaseSettings):
    """Application settings sourced from ``AURA_*`` env vars and Streamlit secrets."""

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float = 15.0
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="AURA_", extra="ignore")

    @property
    def http_client_kwargs(self) -> dict[str, Any]:
        return {
            "base_url": self.api_base_url.rstrip("/"),
            "timeout": self.request_timeout_seconds,
        }


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings; secrets win over the environment."""

    return Settings(**_secrets_overrides())
