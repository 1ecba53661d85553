from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    api_key: str = ""
    call_timeout_s: float = 10.0
    register_attempts: int = 3
    register_delay_s: float = 1.0
    user_agent: str = "superapp-client/0.1.0"

    def __post_init__(self) -> None:
        if not (self.base_url or "").strip():
            raise ValueError("base_url is required")
        if self.register_attempts < 1:
            raise ValueError("register_attempts must be at least 1")
