"""
Tests for gateway configuration loading.
"""

from shared.config import GatewayConfig, get_config


def test_defaults(monkeypatch):
    for name in ("REDIS_URL", "UPSTREAM_BASE_URL", "CACHE_TTL_SECONDS", "UPSTREAM_LIST_TIMEOUT", "PORT"):
        monkeypatch.delenv(name, raising=False)

    config = GatewayConfig(_env_file=None)

    assert config.redis_url == "redis://localhost:6379"
    assert config.upstream_base_url == "https://jsonplaceholder.typicode.com"
    assert config.cache_ttl_seconds == 3600
    assert config.upstream_list_timeout == 10.0
    assert config.port == 3000


def test_redis_url_from_environment(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://cache.internal:6380/1")

    assert get_config().redis_url == "redis://cache.internal:6380/1"


def test_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://cache.internal:6380/1")

    assert get_config(redis_url="redis://other:6379").redis_url == "redis://other:6379"
