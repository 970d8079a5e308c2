"""Pod problems.

Every check walks container statuses in listed order, regular containers
before init containers, and reports only the first matching container.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from k8r.models.config import CheckupConfig
from k8r.models.resources import ResourceKind, ResourceView
from k8r.problems.base import Detection, Problem

_IMAGE_PULL_REASONS = frozenset({"ImagePullBackOff", "ErrImagePull"})


def _statuses(pod: ResourceView, init: bool = False) -> list[dict[str, Any]]:
    key = "initContainerStatuses" if init else "containerStatuses"
    return pod.status.get(key) or []


def _all_statuses(pod: ResourceView) -> Iterator[tuple[bool, dict[str, Any]]]:
    """Yield (is_init, status) for regular containers, then init containers."""
    for cs in _statuses(pod):
        yield False, cs
    for cs in _statuses(pod, init=True):
        yield True, cs


def _state(cs: dict[str, Any], which: str, key: str) -> dict[str, Any] | None:
    # which: "state" or "lastState"; key: "waiting", "running", "terminated"
    return (cs.get(which) or {}).get(key)


def _label(is_init: bool) -> str:
    return "Init container" if is_init else "Container"


def _image_for(pod: ResourceView, name: str, is_init: bool) -> str:
    containers = pod.spec.get("initContainers" if is_init else "containers") or []
    for container in containers:
        if container.get("name") == name:
            return str(container.get("image") or "unknown")
    return "unknown"


class PodCrashLoopBackOff(Problem):
    """Matches containers waiting in CrashLoopBackOff."""

    problem_id = "PodCrashLoopBackOff"
    short_description = "A pod is in a crash loop backoff state, meaning it is crashing repeatedly"
    kind = ResourceKind.POD

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        for is_init, cs in _all_statuses(resource):
            waiting = _state(cs, "state", "waiting")
            if waiting is None or waiting.get("reason") != "CrashLoopBackOff":
                continue
            detail = f"{_label(is_init)} {cs.get('name')} in a crash loop backoff state"
            last = _state(cs, "lastState", "terminated") or {}
            if last.get("message"):
                detail += f": {last['message']}"
            return Detection(detail)
        return None


class PodNotReady(Problem):
    """Matches running pods with a container that is not ready."""

    problem_id = "PodNotReady"
    short_description = "A pod is not ready which can indicate a problem with the pod"
    kind = ResourceKind.POD

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        # Only running pods; completed jobs and pending pods have their own problems.
        if resource.status.get("phase") != "Running":
            return None
        for cs in _statuses(resource):
            if not cs.get("ready", False):
                return Detection(f"Container {cs.get('name')} is not ready")
        return None


class PodImagePullBackOff(Problem):
    """Matches containers that cannot pull their image."""

    problem_id = "PodImagePullBackOff"
    short_description = "A pod is in a image pull backoff state, meaning it is unable to pull the image"
    kind = ResourceKind.POD

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        for is_init, cs in _all_statuses(resource):
            waiting = _state(cs, "state", "waiting")
            if waiting is None or waiting.get("reason") not in _IMAGE_PULL_REASONS:
                continue
            name = cs.get("name")
            image = _image_for(resource, str(name), is_init)
            return Detection(f"{_label(is_init)} {name} is failing to pull its image ({image})")
        return None


class PodOOMKilled(Problem):
    """Matches containers terminated now or last run with OOMKilled."""

    problem_id = "PodOOMKilled"
    short_description = "A pod was killed because it ran out of memory recently"
    kind = ResourceKind.POD

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        for cs in _statuses(resource):
            name = cs.get("name")
            current = _state(cs, "state", "terminated")
            if current is not None and current.get("reason") == "OOMKilled":
                return Detection(f"Container {name} was killed because it ran out of memory")

            last = _state(cs, "lastState", "terminated")
            if last is not None and last.get("reason") == "OOMKilled":
                finished = last.get("finishedAt") or "unknown time"
                return Detection(
                    f"Container {name} was recently killed because it ran out of memory: {finished}",
                    warning=True,
                )
        return None


class PodPending(Problem):
    """Matches pending pods with a waiting container."""

    problem_id = "PodPending"
    short_description = "A pod is pending"
    kind = ResourceKind.POD

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        if resource.status.get("phase") != "Pending":
            return None
        for is_init, cs in _all_statuses(resource):
            waiting = _state(cs, "state", "waiting")
            if waiting is None:
                continue
            message = waiting.get("message") or waiting.get("reason") or ""
            return Detection(f"{_label(is_init)} {cs.get('name')} is pending: {message}")
        return None


class HighRestarts(Problem):
    """Matches containers restarted at least the configured threshold."""

    problem_id = "HighRestarts"
    short_description = "A pod keeps restarting which can indicate a problem"
    kind = ResourceKind.POD
    help_url = "https://github.com/Ashvin-Ranjan/k8r/wiki/HighRestarts"

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        # Phase is not checked: a crashing pod may sit outside Running for long periods.
        for cs in _statuses(resource):
            restarts = int(cs.get("restartCount") or 0)
            if restarts >= config.restart_threshold:
                return Detection(
                    f"Container {cs.get('name')} of pod {resource.name} has restarted {restarts} time(s)"
                )
        return None


POD_PROBLEMS: tuple[Problem, ...] = (
    PodCrashLoopBackOff(),
    PodNotReady(),
    PodImagePullBackOff(),
    PodOOMKilled(),
    PodPending(),
    HighRestarts(),
)
