from __future__ import annotations

from superapp_client.discovery import DEFAULT_CANDIDATES, DiscoveryResult

from superapp_cli import config
from superapp_cli.http import make_client


def test_make_client_probes_configured_url_first(monkeypatch) -> None:
    monkeypatch.delenv("SUPERAPP_BASE_URL", raising=False)
    monkeypatch.delenv(config.ENV_API_KEY, raising=False)
    captured = {}

    def _fake_discover(candidates):
        captured["candidates"] = list(candidates)
        return DiscoveryResult(base_url="http://mine.test/v1/super", confirmed=True)

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["base_url"] = client_cfg.base_url
            captured["api_key"] = client_cfg.api_key

    monkeypatch.setattr("superapp_cli.http.discover_base_url", _fake_discover)
    monkeypatch.setattr("superapp_cli.http.SuperAppClient", _FakeClient)

    cfg = config.AppConfig(api_key="k", base_url="http://mine.test/v1/super")
    make_client(cfg)

    assert captured["candidates"] == ["http://mine.test/v1/super", *DEFAULT_CANDIDATES]
    assert captured["base_url"] == "http://mine.test/v1/super"
    assert captured["api_key"] == "k"


def test_make_client_override_wins_over_settings(monkeypatch) -> None:
    monkeypatch.delenv("SUPERAPP_BASE_URL", raising=False)
    captured = {}

    def _fake_discover(candidates):
        captured["candidates"] = list(candidates)
        return DiscoveryResult(base_url="http://localhost:8080/v1/super", confirmed=False)

    monkeypatch.setattr("superapp_cli.http.discover_base_url", _fake_discover)
    monkeypatch.setattr("superapp_cli.http.SuperAppClient", lambda _cfg: None)

    make_client(config.AppConfig(base_url="http://mine.test"), base_url_override="override.test/")

    assert captured["candidates"][0] == "https://override.test"
    assert "http://mine.test" not in captured["candidates"]
