from __future__ import annotations

from superapp_client import SuperAppClient
from superapp_client.config_types import ClientConfig
from superapp_client.discovery import DiscoveryResult, candidate_urls, discover_base_url

from . import console
from .config import AppConfig, normalize_base_url, resolve_api_key


def discover(cfg: AppConfig, *, base_url_override: str | None = None) -> DiscoveryResult:
    preferred = normalize_base_url(base_url_override or cfg.base_url) or None
    result = discover_base_url(candidate_urls(preferred))
    if not result.confirmed:
        console.warn(f"Super App not reachable; using unverified default {result.base_url}")
    return result


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> SuperAppClient:
    found = discover(cfg, base_url_override=base_url_override)
    return SuperAppClient(ClientConfig(base_url=found.base_url, api_key=resolve_api_key(cfg)))
