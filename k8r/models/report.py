"""Detection record data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    """Finding severity.

    ERROR is actively occurring; WARNING is informational or happened
    recently but is not harmful right now.
    """

    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def from_warning(cls, warning: bool) -> Severity:
        return cls.WARNING if warning else cls.ERROR


# Render order: errors are listed before warnings.
SEVERITY_ORDER: tuple[Severity, ...] = (Severity.ERROR, Severity.WARNING)


@dataclass(frozen=True)
class ResourceRecord:
    """One occurrence of a problem on one concrete resource.

    Created during a scan pass and held only long enough to build a Report.
    """

    resource_name: str  # "<namespace>/<name>"
    resource_type: str  # e.g. "pod", "HPA"
    problem_id: str
    detail: str = ""
    owner: str = ""  # reporting_team label, empty if absent
    warning: bool = False

    @property
    def severity(self) -> Severity:
        return Severity.from_warning(self.warning)
