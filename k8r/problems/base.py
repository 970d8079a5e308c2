"""Problem interface and the problem catalog.

Each known problem is a ``Problem`` subclass bound to one ``ResourceKind``.
The catalog is built once per process by ``k8r.problems.build_catalog()``
and passed explicitly to the scanner and the report aggregator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from k8r.models.config import CheckupConfig
from k8r.models.resources import ResourceKind, ResourceView

HELP_URL_BASE = "https://github.com/Ashvin-Ranjan/k8r/wiki/"


@dataclass(frozen=True)
class Detection:
    """A problem occurring on one resource."""

    detail: str
    warning: bool = False


class Problem(ABC):
    """A detection rule.

    Subclasses set the class attributes and implement ``check()``. ``detect()``
    guards the kind, so ``check()`` only ever sees resources of ``kind``.
    """

    problem_id: ClassVar[str]
    short_description: ClassVar[str]
    kind: ClassVar[ResourceKind]
    help_url: ClassVar[str] = ""

    def detect(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        """Return a Detection when the problem occurs on ``resource``, else None.

        A resource of another kind is never an error: it simply does not
        have this problem.
        """
        if not isinstance(resource, ResourceView) or resource.kind is not self.kind:
            return None
        return self.check(resource, config)

    @abstractmethod
    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        """Kind-specific detection logic. Must not mutate ``resource``."""

    @property
    def resolved_help_url(self) -> str:
        return self.help_url or HELP_URL_BASE + self.problem_id

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.problem_id}>"


class Catalog:
    """Immutable set of problems, partitioned by resource kind."""

    def __init__(self, problems: Iterable[Problem]) -> None:
        by_id: dict[str, Problem] = {}
        for problem in problems:
            if problem.problem_id in by_id:
                raise ValueError(f"duplicate problem id: {problem.problem_id}")
            by_id[problem.problem_id] = problem
        self._by_id = by_id
        self._by_kind: dict[ResourceKind, tuple[Problem, ...]] = {
            kind: tuple(p for p in by_id.values() if p.kind is kind) for kind in ResourceKind
        }

    def get(self, problem_id: str) -> Problem | None:
        return self._by_id.get(problem_id)

    def for_kind(self, kind: ResourceKind) -> tuple[Problem, ...]:
        """Problems registered for ``kind``, in registration order."""
        return self._by_kind.get(kind, ())

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._by_id)

    def __contains__(self, problem_id: object) -> bool:
        return problem_id in self._by_id

    def __iter__(self) -> Iterator[Problem]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
