"""Cluster snapshot retrieval with kubernetes-asyncio.

Lists pods and HorizontalPodAutoscalers across all namespaces and turns each
item into a ``ResourceView``. Any failure here is fatal for the run and is
raised as ``ClusterAccessError`` with the cause chained.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]
from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]

from k8r.errors import ClusterAccessError
from k8r.models.config import KubeConfig
from k8r.models.resources import ResourceKind, ResourceView
from k8r.observability.logging import get_logger

_logger = get_logger("collector")


@dataclass(frozen=True)
class ClusterSnapshot:
    """Point-in-time listing of every resource kind the scanner understands."""

    pods: tuple[ResourceView, ...] = field(default_factory=tuple)
    hpas: tuple[ResourceView, ...] = field(default_factory=tuple)

    def resources(self, kind: ResourceKind) -> tuple[ResourceView, ...]:
        if kind is ResourceKind.POD:
            return self.pods
        if kind is ResourceKind.HPA:
            return self.hpas
        return ()


async def load_kube_client_config(kube: KubeConfig) -> None:
    """Configure the kubernetes-asyncio default client.

    The in-cluster service account is used only when neither a kubeconfig
    path nor a context was given; otherwise the kubeconfig is loaded,
    optionally for ``kube.context``.
    """
    try:
        if not kube.kubeconfig and not kube.context:
            try:
                k8s_config.load_incluster_config()
                _logger.info("k8s client configured from in-cluster service account")
                return
            except k8s_config.ConfigException:
                _logger.debug("not running in a cluster; falling back to kubeconfig")
        await k8s_config.load_kube_config(
            config_file=kube.kubeconfig or None,
            context=kube.context or None,
        )
        _logger.info("k8s client configured from kubeconfig", context=kube.context or "current")
    except Exception as exc:
        raise ClusterAccessError(f"failed to get kubernetes client (is the cluster reachable?): {exc}") from exc


def _to_views(api_client: Any, kind: ResourceKind, items: list[Any]) -> tuple[ResourceView, ...]:
    return tuple(
        ResourceView.from_api_object(kind, api_client.sanitize_for_serialization(item)) for item in items
    )


async def fetch_snapshot(api_client: Any) -> ClusterSnapshot:
    """List pods and HPAs in all namespaces. No retry on failure."""
    core_v1 = k8s_client.CoreV1Api(api_client)
    autoscaling_v1 = k8s_client.AutoscalingV1Api(api_client)

    try:
        pod_list = await core_v1.list_pod_for_all_namespaces()
    except Exception as exc:
        raise ClusterAccessError(f"failed to list pods: {exc}") from exc

    try:
        hpa_list = await autoscaling_v1.list_horizontal_pod_autoscaler_for_all_namespaces()
    except Exception as exc:
        raise ClusterAccessError(f"failed to list hpas: {exc}") from exc

    snapshot = ClusterSnapshot(
        pods=_to_views(api_client, ResourceKind.POD, pod_list.items or []),
        hpas=_to_views(api_client, ResourceKind.HPA, hpa_list.items or []),
    )
    _logger.info("snapshot_fetched", pods=len(snapshot.pods), hpas=len(snapshot.hpas))
    return snapshot
