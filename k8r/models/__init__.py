"""Core data structures for k8r."""

from k8r.models.config import CheckupConfig, K8rConfig, KubeConfig, LogConfig
from k8r.models.report import SEVERITY_ORDER, ResourceRecord, Severity
from k8r.models.resources import ResourceKind, ResourceView

__all__ = [
    "SEVERITY_ORDER",
    "CheckupConfig",
    "K8rConfig",
    "KubeConfig",
    "LogConfig",
    "ResourceKind",
    "ResourceRecord",
    "ResourceView",
    "Severity",
]
