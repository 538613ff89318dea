from __future__ import annotations

import streamlit as st

from config import DEFAULT_API_BASE_URL, Settings, get_settings


def test_defaults_point_at_hosted_api(monkeypatch):
    monkeypatch.delenv("AURA_API_BASE_URL", raising=False)
    settings = Settings()

    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.poll_interval_seconds == 10.0
    assert settings.http_client_kwargs["timeout"] == 15.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AURA_API_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("AURA_POLL_INTERVAL_SECONDS", "3")

    settings = Settings()

    assert settings.http_client_kwargs["base_url"] == "http://localhost:8080"
    assert settings.poll_interval_seconds == 3.0


def test_streamlit_secrets_take_precedence(monkeypatch):
    monkeypatch.setattr(
        st,
        "secrets",
        {"api": {"base_url": "https://staging.example", "poll_interval": 5}},
        raising=False,
    )
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.api_base_url == "https://staging.example"
    assert settings.poll_interval_seconds == 5.0
