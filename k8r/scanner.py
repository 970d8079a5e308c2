"""Resource scanner: runs the catalog over a snapshot and emits records."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from k8r.models.config import CheckupConfig
from k8r.models.report import ResourceRecord
from k8r.models.resources import ResourceKind, ResourceView
from k8r.observability.logging import get_logger
from k8r.problems.base import Catalog

if TYPE_CHECKING:
    from k8r.collector.snapshot import ClusterSnapshot

_logger = get_logger("scanner")

OWNER_LABEL = "reporting_team"


def scan(
    kind: ResourceKind,
    resources: Iterable[ResourceView],
    catalog: Catalog,
    config: CheckupConfig,
) -> list[ResourceRecord]:
    """Run every ``kind`` problem against each resource, in order.

    A resource produces one record per occurring problem; problems are
    independent, so one resource may appear several times.
    """
    problems = catalog.for_kind(kind)
    records: list[ResourceRecord] = []
    scanned = 0

    for resource in resources:
        scanned += 1
        resource_name = resource.qualified_name
        owner = resource.labels.get(OWNER_LABEL, "")

        for problem in problems:
            detection = problem.detect(resource, config)
            if detection is None:
                continue
            _logger.debug(
                "problem_detected",
                problem_id=problem.problem_id,
                resource=resource_name,
                warning=detection.warning,
            )
            records.append(
                ResourceRecord(
                    resource_name=resource_name,
                    resource_type=kind.value,
                    problem_id=problem.problem_id,
                    detail=detection.detail,
                    owner=owner,
                    warning=detection.warning,
                )
            )

    _logger.info("kind_scanned", kind=kind.value, resources=scanned, records=len(records))
    return records


def scan_snapshot(
    snapshot: ClusterSnapshot,
    catalog: Catalog,
    config: CheckupConfig,
) -> list[ResourceRecord]:
    """Scan every kind of ``snapshot``, one kind at a time (pods first)."""
    records: list[ResourceRecord] = []
    for kind in ResourceKind:
        records.extend(scan(kind, snapshot.resources(kind), catalog, config))
    return records
