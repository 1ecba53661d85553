from __future__ import annotations

import json
import time
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import EncodeError, NetworkError, RequestTimeoutError

# Dropped when the body is rebuilt from already-decoded bytes.
_BODY_HEADERS = {"content-encoding", "content-length", "transfer-encoding"}


def encode_json(body: Any) -> bytes:
    try:
        return json.dumps(body, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodeError(f"error encoding request JSON: {e}") from e


class SharedTransport(httpx.BaseTransport):
    """Delegates to a transport owned by someone else; closing it is a no-op."""

    def __init__(self, transport: httpx.BaseTransport):
        self._transport = transport

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._transport.handle_request(request)

    def close(self) -> None:
        pass


def send_with_deadline(
        client: httpx.Client,
        method: str,
        url: str,
        *,
        timeout_s: float,
        content: bytes | None = None,
        read_body: bool = True,
) -> httpx.Response:
    """Send a request whose whole round trip, body included, must finish within ``timeout_s``.

    httpx applies its timeout to each connect/read/write separately, so a host
    that dribbles the body would otherwise hold the call open indefinitely.
    Overrunning the deadline raises ``httpx.ReadTimeout``.
    """
    deadline = time.monotonic() + timeout_s
    with client.stream(method, url, content=content, timeout=timeout_s) as r:
        _check_deadline(r.request, deadline, timeout_s)
        if not read_body:
            return httpx.Response(r.status_code, headers=r.headers, request=r.request)
        chunks: list[bytes] = []
        for chunk in r.iter_bytes():
            chunks.append(chunk)
            _check_deadline(r.request, deadline, timeout_s)
        headers = [(k, v) for k, v in r.headers.multi_items() if k.lower() not in _BODY_HEADERS]
        return httpx.Response(r.status_code, headers=headers, content=b"".join(chunks), request=r.request)


def _check_deadline(request: httpx.Request, deadline: float, timeout_s: float) -> None:
    if time.monotonic() > deadline:
        raise httpx.ReadTimeout(f"no complete response within {timeout_s:g} seconds", request=request)


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": cfg.user_agent,
            "Content-Type": "application/json",
        }
        self._client = httpx.Client(
            base_url=cfg.base_url.rstrip("/"),
            timeout=cfg.call_timeout_s,
            headers=headers,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._cfg.base_url.rstrip("/")

    def close(self) -> None:
        self._client.close()

    def post_json(self, path: str, body: Any, *, timeout: float | None = None) -> httpx.Response:
        content = encode_json(body)
        effective_timeout = self._cfg.call_timeout_s if timeout is None else timeout
        try:
            return send_with_deadline(self._client, "POST", path, timeout_s=effective_timeout, content=content)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"POST {path} timed out after {effective_timeout:g} seconds",
                timeout_s=effective_timeout,
            ) from e
        except httpx.RequestError as e:
            raise NetworkError(f"POST {path} failed: {e}") from e
