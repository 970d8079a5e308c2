"""Checkup orchestration.

One run, in order: configure the client -> fetch the snapshot -> scan ->
build the report. Acquisition errors abort before any scan starts.
"""

from __future__ import annotations

from collections.abc import Callable

from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

from k8r.collector.snapshot import fetch_snapshot, load_kube_client_config
from k8r.models.config import K8rConfig
from k8r.observability.logging import get_logger
from k8r.problems import Catalog, build_catalog
from k8r.report import Report, build_report
from k8r.scanner import scan_snapshot

_logger = get_logger("app")


async def run_checkup(
    config: K8rConfig,
    catalog: Catalog | None = None,
    on_scan_start: Callable[[], None] | None = None,
) -> Report:
    """Run one checkup against the configured cluster and return its Report.

    ``on_scan_start`` is called once the snapshot is in hand, right before
    scanning; the CLI uses it for its progress line.

    Raises ClusterAccessError when the client or a listing fails.
    """
    if catalog is None:
        catalog = build_catalog()

    await load_kube_client_config(config.kube)
    async with k8s_client.ApiClient() as api_client:
        snapshot = await fetch_snapshot(api_client)

    if on_scan_start is not None:
        on_scan_start()

    records = scan_snapshot(snapshot, catalog, config.checkup)
    report = build_report(records, catalog)
    _logger.info(
        "checkup_complete",
        records=len(report.records),
        problems=[p.problem_id for p in report.problems],
    )
    return report
