"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from k8r.errors import ConfigError
from k8r.models.config import (
    DEFAULT_RESTART_THRESHOLD,
    CheckupConfig,
    K8rConfig,
    KubeConfig,
    LogConfig,
)
from k8r.observability.logging import LOG_FORMATS

LOG_LEVELS = ("debug", "info", "warning", "error")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"K8R_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    raw = _env(key, str(default))
    try:
        val = int(raw)
    except ValueError as exc:
        raise ConfigError(f"K8R_{key} must be an integer, got {raw!r}") from exc
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_log_level(value: str) -> str:
    if value.lower() not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {value}. Must be one of {set(LOG_LEVELS)}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    if value.lower() not in LOG_FORMATS:
        raise ConfigError(f"Invalid log format: {value}. Must be one of {set(LOG_FORMATS)}")
    return value.lower()


def load_config() -> K8rConfig:
    """Load configuration from K8R_* environment variables."""
    return K8rConfig(
        checkup=CheckupConfig(
            restart_threshold=_env_int("RESTART_THRESHOLD", DEFAULT_RESTART_THRESHOLD, min_val=1),
        ),
        kube=KubeConfig(
            kubeconfig=_env("KUBECONFIG", ""),
            context=_env("CONTEXT", ""),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "warning")),
            format=_validate_log_format(_env("LOG_FORMAT", "console")),
        ),
    )
