"""Report aggregation.

Turns the flat record list of a scan into a ``Report``: the distinct
problems that occurred plus two derived groupings, by problem and by
severity. The groupings are recomputed on every call and never cached.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from k8r.models.report import ResourceRecord, Severity
from k8r.observability.logging import get_logger
from k8r.problems.base import Catalog, Problem

_logger = get_logger("report")


@dataclass(frozen=True)
class Report:
    """Aggregate view over a completed scan.

    ``records`` is a tuple copy of the scan records, same order and
    contents; later changes to the caller's list do not reach the report.
    """

    problems: tuple[Problem, ...]
    records: tuple[ResourceRecord, ...]

    @property
    def is_clean(self) -> bool:
        return not self.records

    def get_problem(self, problem_id: str) -> Problem | None:
        for problem in self.problems:
            if problem.problem_id == problem_id:
                return problem
        return None

    def by_problem(self) -> dict[str, list[ResourceRecord]]:
        """Map problem id to its records, in report problem order.

        Records whose id did not resolve to a catalog problem are left out.
        """
        grouped: dict[str, list[ResourceRecord]] = {}
        for problem in self.problems:
            grouped[problem.problem_id] = [r for r in self.records if r.problem_id == problem.problem_id]
        return grouped

    def by_severity(self) -> dict[Severity, dict[str, list[ResourceRecord]]]:
        """Map severity to (problem id -> records). Both severities always present."""
        grouped: dict[Severity, dict[str, list[ResourceRecord]]] = {
            Severity.ERROR: {},
            Severity.WARNING: {},
        }
        for record in self.records:
            grouped[record.severity].setdefault(record.problem_id, []).append(record)
        return grouped


def build_report(records: Sequence[ResourceRecord], catalog: Catalog) -> Report:
    """Build a Report from scan records.

    ``problems`` holds each distinct resolvable problem id once, in order of
    first appearance. Unknown ids are skipped, not raised.
    """
    seen: set[str] = set()
    problems: list[Problem] = []

    for record in records:
        if record.problem_id in seen:
            continue
        seen.add(record.problem_id)
        problem = catalog.get(record.problem_id)
        if problem is None:
            _logger.debug("unknown_problem_id", problem_id=record.problem_id)
            continue
        problems.append(problem)

    return Report(problems=tuple(problems), records=tuple(records))
