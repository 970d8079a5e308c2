"""Shared fixtures for k8r integration tests.

Provides a realistic mixed cluster snapshot and a patched cluster client so
the full checkup pipeline (snapshot -> scan -> report -> render) runs
without touching a real Kubernetes cluster.
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from k8r.collector.snapshot import ClusterSnapshot
from tests.factories import container_status, make_hpa, make_pod


@pytest.fixture
def troubled_snapshot() -> ClusterSnapshot:
    """A cluster with one healthy pod and a handful of known problems."""
    return ClusterSnapshot(
        pods=(
            make_pod(name="healthy-0", namespace="shop"),
            make_pod(
                name="api-5d9c",
                namespace="shop",
                statuses=[
                    container_status(
                        name="api",
                        ready=False,
                        restart_count=5,
                        waiting_reason="CrashLoopBackOff",
                        last_terminated_reason="Error",
                        last_message="panic: nil map",
                    )
                ],
                labels={"reporting_team": "checkout"},
            ),
            make_pod(
                name="worker-1",
                namespace="jobs",
                statuses=[
                    container_status(
                        name="worker",
                        last_terminated_reason="OOMKilled",
                        finished_at="2026-10-18T08:15:00Z",
                    )
                ],
            ),
            make_pod(
                name="web-2",
                namespace="shop",
                phase="Pending",
                statuses=[container_status(name="web", ready=False, waiting_reason="ImagePullBackOff")],
                containers=[{"name": "web", "image": "ghcr.io/acme/web:typo"}],
            ),
        ),
        hpas=(
            make_hpa(name="api", namespace="shop", max_replicas=10, current_replicas=10),
            make_hpa(name="web", namespace="shop", max_replicas=10, current_replicas=9),
        ),
    )


@pytest.fixture
def healthy_snapshot() -> ClusterSnapshot:
    return ClusterSnapshot(
        pods=(make_pod(name="a"), make_pod(name="b", namespace="kube-system")),
        hpas=(make_hpa(max_replicas=5, current_replicas=2),),
    )


@pytest.fixture
def patched_cluster() -> Iterator[MagicMock]:
    """Patch client configuration and the ApiClient; yields the fetch mock."""
    fetch = AsyncMock()
    with (
        patch("k8r.app.load_kube_client_config", AsyncMock()),
        patch("k8r.app.k8s_client") as k8s_client,
        patch("k8r.app.fetch_snapshot", fetch),
    ):
        k8s_client.ApiClient.return_value = MagicMock()
        yield fetch
