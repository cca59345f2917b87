from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from core.variant import DEFAULT_VARIANT, get_variant

CONFIG_ENV = "DOIT_CONFIG"
REQUIRED_KEYS = ("protocol", "url", "port", "username", "password")
DEFAULT_TIMEOUT = 10.0


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    protocol: str
    url: str
    port: str
    username: str
    password: str
    variant: str = DEFAULT_VARIANT
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.url}:{self.port}"


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg) / "doit" / "config.yaml"


def _read_config(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> ClientConfig:
    """Load the client configuration once at startup.

    Every required key must be present; `variant` and `timeout` are optional.
    Any problem is reported as ConfigError so the caller can exit cleanly.
    """
    config_path = Path(path).expanduser() if path else default_config_path()
    data = _read_config(config_path)
    missing = [key for key in REQUIRED_KEYS if data.get(key) is None]
    if missing:
        raise ConfigError(f"config {config_path} is missing: {', '.join(missing)}")

    variant = str(data.get("variant") or DEFAULT_VARIANT).strip().lower()
    try:
        get_variant(variant)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    try:
        timeout = float(data.get("timeout", DEFAULT_TIMEOUT))
        if timeout <= 0:
            raise ValueError
    except (TypeError, ValueError):
        raise ConfigError(f"config {config_path}: timeout must be a positive number") from None

    return ClientConfig(
        protocol=str(data["protocol"]).strip(),
        url=str(data["url"]).strip(),
        port=str(data["port"]).strip(),
        username=str(data["username"]),
        password=str(data["password"]),
        variant=variant,
        timeout=timeout,
    )


__all__ = ["ClientConfig", "ConfigError", "CONFIG_ENV", "default_config_path", "load_config"]
