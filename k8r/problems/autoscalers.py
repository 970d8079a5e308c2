"""HorizontalPodAutoscaler problems (autoscaling/v1 field names)."""

from __future__ import annotations

from k8r.models.config import CheckupConfig
from k8r.models.resources import ResourceKind, ResourceView
from k8r.problems.base import Detection, Problem


class MaxedOutHPAs(Problem):
    """Matches HPAs running at their maximum replica count."""

    problem_id = "MaxedOutHPAs"
    short_description = "A pod's HPAs current replicas is equal to its max"
    kind = ResourceKind.HPA
    help_url = "https://github.com/Ashvin-Ranjan/k8r/wiki/MaxedOutHPAs"

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        max_replicas = resource.spec.get("maxReplicas")
        current = resource.status.get("currentReplicas")
        if max_replicas is None or current is None:
            return None
        if current == max_replicas:
            return Detection(f"{resource.name} has {current}/{max_replicas} replicas")
        return None


HPA_PROBLEMS: tuple[Problem, ...] = (MaxedOutHPAs(),)
