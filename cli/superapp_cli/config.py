from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from superapp_client.discovery import normalize_base_url

APP_NAME = "superapp"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "SUPERAPP_API_KEY"

SETTING_KEYS = ("api_key", "base_url", "app_name", "app_url")


@dataclass
class AppConfig:
    api_key: str = ""
    base_url: str = ""
    app_name: str = ""
    app_url: str = ""


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {key: value for key, value in _as_dict(cfg).items() if value}


def _as_dict(cfg: AppConfig) -> dict[str, str]:
    return {key: getattr(cfg, key) for key in SETTING_KEYS}


def from_toml(data: dict[str, Any]) -> AppConfig:
    return AppConfig(
        api_key=str(data.get("api_key") or "").strip(),
        base_url=normalize_base_url(str(data.get("base_url") or "")),
        app_name=str(data.get("app_name") or "").strip(),
        app_url=str(data.get("app_url") or "").strip(),
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_api_key(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_API_KEY, "").strip()
    if env_value:
        return env_value
    return cfg.api_key


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
