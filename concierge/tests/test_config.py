from __future__ import annotations

from concierge.config import ServiceConfig


def test_defaults(monkeypatch):
    for name in ("CONCIERGE_API_MODE", "CONCIERGE_API_BASE", "CONCIERGE_API_KEY", "CONCIERGE_ORG_KEY", "CONCIERGE_LATENCY_MS"):
        monkeypatch.delenv(name, raising=False)
    config = ServiceConfig()
    assert config.api_mode == "mock"
    assert config.api_base == "https://api.bebond.net"
    assert config.api_key == ""
    assert config.org_key == "BB_vrconcierge"
    assert config.latency_ms == 0
    assert config.catalog_path.name == "restaurants.json"
    assert config.catalog_path.is_file()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CONCIERGE_API_MODE", "remote")
    monkeypatch.setenv("CONCIERGE_API_BASE", "https://directory.test")
    monkeypatch.setenv("CONCIERGE_ORG_KEY", "BB_other")
    monkeypatch.setenv("CONCIERGE_LATENCY_MS", "250")
    config = ServiceConfig()
    assert config.api_mode == "remote"
    assert config.api_base == "https://directory.test"
    assert config.org_key == "BB_other"
    assert config.latency_ms == 250


def test_invalid_latency_falls_back(monkeypatch):
    monkeypatch.setenv("CONCIERGE_LATENCY_MS", "soon")
    assert ServiceConfig().latency_ms == 0
