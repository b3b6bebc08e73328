# infrastructure/config/env_config_loader.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from application.resolver_config import ResolverConfig
from domain.exceptions import ConfigError

ENV_ENABLE_PATH_PREFIX = "URLHELPER_ENABLE_PATH_PREFIX"
ENV_LOG_LEVEL = "URLHELPER_LOG_LEVEL"
ENV_LOG_JSON = "URLHELPER_LOG_JSON"
ENV_HOST = "URLHELPER_HOST"
ENV_PORT = "URLHELPER_PORT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}
_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

# プロジェクトルートの .env
DEFAULT_ENV_PATH = Path(__file__).parent.parent.parent / ".env"


@dataclass(frozen=True)
class AppSettings:
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    log_level: str = "INFO"
    log_json: bool = False
    host: str = "127.0.0.1"
    port: int = 8000


class EnvConfigLoader:
    """
    環境変数と.envファイルからアプリケーション設定を読み込む

    環境変数が.envファイルの値より優先される。
    設定は起動時に一度だけ読み込み、以降は変更しない。
    """

    def __init__(
        self,
        env_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._env_path = env_path or DEFAULT_ENV_PATH
        self._environ = os.environ if environ is None else environ

    def load(self) -> AppSettings:
        values = self._collect()
        return AppSettings(
            resolver=ResolverConfig(
                enable_path_prefix=_parse_bool(ENV_ENABLE_PATH_PREFIX, values.get(ENV_ENABLE_PATH_PREFIX)),
            ),
            log_level=_parse_log_level(values.get(ENV_LOG_LEVEL)),
            log_json=_parse_bool(ENV_LOG_JSON, values.get(ENV_LOG_JSON)),
            host=values.get(ENV_HOST) or "127.0.0.1",
            port=_parse_port(values.get(ENV_PORT)),
        )

    def _collect(self) -> Dict[str, str]:
        values: Dict[str, str] = {}
        if self._env_path.exists():
            for key, value in dotenv_values(self._env_path).items():
                if value is not None:
                    values[key] = value
        values.update(self._environ)
        return values


def _parse_bool(name: str, raw: Optional[str]) -> bool:
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_log_level(raw: Optional[str]) -> str:
    if not raw:
        return "INFO"
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"{ENV_LOG_LEVEL} must be one of {sorted(_LOG_LEVELS)}, got {raw!r}")
    return level


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return 8000
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PORT} must be an integer, got {raw!r}") from exc
    if not 0 < port < 65536:
        raise ConfigError(f"{ENV_PORT} out of range: {port}")
    return port
