from __future__ import annotations

import json
import logging
from typing import Any, Iterable

import httpx

from .config_types import ClientConfig
from .discovery import PROBE_TIMEOUT_S, discover_base_url
from .errors import ApiError, DecodeError, NetworkError
from .retry import AttemptResult, DelayPolicy, FixedDelay, run_attempts
from .transport import Transport

log = logging.getLogger(__name__)


def normalize_app_url(value: str) -> str:
    """Drop exactly one trailing slash."""
    if value.endswith("/"):
        return value[:-1]
    return value


def _status_error(response: httpx.Response) -> ApiError:
    text = response.text
    return ApiError(
        response.status_code,
        f"server returned non-OK status: {response.status_code} - {text}",
        text[:1000] if text else None,
    )


class SuperAppClient:
    def __init__(
            self,
            cfg: ClientConfig,
            *,
            transport: httpx.BaseTransport | None = None,
            delay: DelayPolicy | None = None,
    ):
        self.cfg = cfg
        self._t = Transport(cfg, transport=transport)
        self._delay = delay if delay is not None else FixedDelay(cfg.register_delay_s)

    @classmethod
    def create(
            cls,
            api_key: str = "",
            *,
            candidates: Iterable[str] | None = None,
            probe_timeout_s: float = PROBE_TIMEOUT_S,
            transport: httpx.BaseTransport | None = None,
            delay: DelayPolicy | None = None,
            **cfg_kwargs: Any,
    ) -> "SuperAppClient":
        """Discover the host, then build a client bound to the adopted base URL.

        ``cfg_kwargs`` are the remaining ``ClientConfig`` fields; ``base_url`` comes
        from discovery and cannot be passed.
        """
        if "base_url" in cfg_kwargs:
            raise TypeError("create() discovers base_url; pass candidates=[...] to steer discovery")
        found = discover_base_url(candidates, timeout_s=probe_timeout_s, transport=transport)
        cfg = ClientConfig(base_url=found.base_url, api_key=api_key, **cfg_kwargs)
        return cls(cfg, transport=transport, delay=delay)

    @property
    def base_url(self) -> str:
        return self._t.base_url

    @property
    def api_key(self) -> str:
        return self.cfg.api_key

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "SuperAppClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def register(self, app_name: str, functions: list[str], app_url: str) -> None:
        body = {
            "appName": app_name,
            "functions": list(functions),
            "url": normalize_app_url(app_url),
        }

        def _attempt(n: int) -> AttemptResult:
            try:
                r = self._t.post_json("/register", body)
            except NetworkError as e:
                log.warning("Register attempt %d failed: %s", n, e)
                return AttemptResult.retryable(n, e)
            log.info("Register response (attempt %d): %s", n, r.text)
            if r.status_code == 200:
                return AttemptResult.success(n)
            return AttemptResult.retryable(n, _status_error(r))

        report = run_attempts(_attempt, attempts=self.cfg.register_attempts, delay=self._delay)
        if report.ok:
            log.debug("Registered %s after %d attempt(s)", app_name, report.attempts)
            return
        log.error("Registering %s failed after %d attempt(s): %s", app_name, report.attempts, report.error)
        if report.error is None:
            raise RuntimeError(f"registration of {app_name} failed without an error")
        raise report.error

    def call_function(
            self,
            caller: str,
            target_app: str,
            function_name: str,
            payload: dict[str, Any],
    ) -> dict[str, Any]:
        body = {
            "caller": caller,
            "targetApp": target_app,
            "functionName": function_name,
            "payload": payload,
        }
        log.info("Calling %s.%s with payload: %s", target_app, function_name,
                 json.dumps(body, ensure_ascii=False, default=repr))

        r = self._t.post_json("/call-function", body, timeout=self.cfg.call_timeout_s)
        text = r.text
        log.info("Raw response from call-function: %s", text)
        if r.status_code != 200:
            raise _status_error(r)

        try:
            data = json.loads(text)
        except ValueError as e:
            raise DecodeError(f"error decoding response JSON: {e}", text) from e
        if not isinstance(data, dict):
            raise DecodeError(
                f"error decoding response JSON: expected an object, got {type(data).__name__}",
                text,
            )
        return data
