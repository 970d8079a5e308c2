"""Problem catalog for k8r.

Exports:
    Problem       -- Base class every catalog entry implements.
    Detection     -- What a problem reports when it occurs on a resource.
    Catalog       -- Immutable, kind-partitioned set of problems.
    build_catalog -- Factory for the default catalog, called once per run.
"""

from __future__ import annotations

from k8r.problems.autoscalers import HPA_PROBLEMS, MaxedOutHPAs
from k8r.problems.base import HELP_URL_BASE, Catalog, Detection, Problem
from k8r.problems.pods import (
    POD_PROBLEMS,
    HighRestarts,
    PodCrashLoopBackOff,
    PodImagePullBackOff,
    PodNotReady,
    PodOOMKilled,
    PodPending,
)

__all__ = [
    "HELP_URL_BASE",
    "Catalog",
    "Detection",
    "HighRestarts",
    "MaxedOutHPAs",
    "PodCrashLoopBackOff",
    "PodImagePullBackOff",
    "PodNotReady",
    "PodOOMKilled",
    "PodPending",
    "Problem",
    "build_catalog",
]


def build_catalog() -> Catalog:
    """Build the default catalog: pod problems, then HPA problems."""
    return Catalog((*POD_PROBLEMS, *HPA_PROBLEMS))
