"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_RESTART_THRESHOLD = 3


@dataclass(frozen=True)
class CheckupConfig:
    """Run-scoped parameters passed into every detector call."""

    restart_threshold: int = DEFAULT_RESTART_THRESHOLD


@dataclass
class KubeConfig:
    """Cluster client configuration."""

    kubeconfig: str = ""  # empty: in-cluster config, then the client default path
    context: str = ""


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"
    format: str = "console"  # "console" or "json"


@dataclass
class K8rConfig:
    """Top-level k8r configuration."""

    checkup: CheckupConfig = field(default_factory=CheckupConfig)
    kube: KubeConfig = field(default_factory=KubeConfig)
    log: LogConfig = field(default_factory=LogConfig)
