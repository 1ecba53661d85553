"""Locate a reachable Super App host.

The host may run on the same machine or, when the mini-app is containerized,
behind the Docker bridge, so a short fixed list of base URLs is probed in
order and the first one that answers is adopted.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable

import httpx

from .transport import SharedTransport, send_with_deadline

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080/v1/super"
DEFAULT_CANDIDATES: tuple[str, ...] = (
    "http://localhost:8080/v1/super",
    "http://host.docker.internal:8080/v1/super",
)
PROBE_PATH = "/list"
PROBE_TIMEOUT_S = 1.0
ENV_BASE_URL = "SUPERAPP_BASE_URL"


@dataclass(frozen=True)
class DiscoveryResult:
    base_url: str
    confirmed: bool
    attempts: list[str] = field(default_factory=list)


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0", "host.docker.internal"}:
        scheme = "http://"
    else:
        scheme = "https://"
    return f"{scheme}{value}"


def _is_valid_url(url: str) -> bool:
    try:
        httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return True


def candidate_urls(preferred: str | None = None) -> list[str]:
    """Ordered candidates: the preferred URL (argument or env) first, then the defaults.

    Unparseable URLs are skipped with a warning.
    """
    urls: list[str] = []
    for raw in (preferred, os.getenv(ENV_BASE_URL), *DEFAULT_CANDIDATES):
        value = normalize_base_url(raw)
        if not value or value in urls:
            continue
        if not _is_valid_url(value):
            log.warning("Ignoring invalid Super App URL %r", value)
            continue
        urls.append(value)
    return urls


def probe(client: httpx.Client, url: str, *, timeout_s: float = PROBE_TIMEOUT_S) -> bool:
    # Any HTTP response means the host is there; the status code is irrelevant.
    try:
        send_with_deadline(client, "GET", f"{url.rstrip('/')}{PROBE_PATH}", timeout_s=timeout_s, read_body=False)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        log.warning("Could not connect to %s: %s", url, e)
        return False
    log.info("Successfully connected to Super App at %s", url)
    return True


def discover_base_url(
        candidates: Iterable[str] | None = None,
        *,
        timeout_s: float = PROBE_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
) -> DiscoveryResult:
    urls = list(candidates) if candidates is not None else candidate_urls()
    attempts: list[str] = []
    # A caller-supplied transport is reused by the client built afterwards.
    probing = SharedTransport(transport) if transport is not None else None
    with httpx.Client(timeout=timeout_s, transport=probing) as client:
        for url in urls:
            attempts.append(url)
            if probe(client, url, timeout_s=timeout_s):
                return DiscoveryResult(base_url=url.rstrip("/"), confirmed=True, attempts=attempts)

    log.warning("Using default Super App URL %s, but connection not verified", DEFAULT_BASE_URL)
    return DiscoveryResult(base_url=DEFAULT_BASE_URL, confirmed=False, attempts=attempts)
