"""Resource view data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ResourceKind(StrEnum):
    """Resource categories the scanner understands.

    The value is the resource type string written into every record.
    """

    POD = "pod"
    HPA = "HPA"


@dataclass(frozen=True)
class ResourceView:
    """Read-only view of one fetched resource.

    ``spec`` and ``status`` keep the Kubernetes API field names
    (``containerStatuses``, ``maxReplicas``, ...). ``kind`` is the variant
    tag the scanner dispatches on.
    """

    kind: ResourceKind
    namespace: str
    name: str
    labels: dict[str, str] = field(default_factory=dict)
    spec: dict[str, Any] = field(default_factory=dict)
    status: dict[str, Any] = field(default_factory=dict)

    @property
    def qualified_name(self) -> str:
        """Return ``<namespace>/<name>``."""
        return f"{self.namespace}/{self.name}"

    @classmethod
    def from_api_object(cls, kind: ResourceKind, raw: dict[str, Any]) -> ResourceView:
        """Build a view from a serialized API object (camelCase dict)."""
        metadata = raw.get("metadata") or {}
        return cls(
            kind=kind,
            namespace=str(metadata.get("namespace") or ""),
            name=str(metadata.get("name") or ""),
            labels=dict(metadata.get("labels") or {}),
            spec=dict(raw.get("spec") or {}),
            status=dict(raw.get("status") or {}),
        )
