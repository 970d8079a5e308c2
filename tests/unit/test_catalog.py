"""Tests for Catalog construction and lookup."""

from __future__ import annotations

import pytest

from k8r.models.config import CheckupConfig
from k8r.models.resources import ResourceKind, ResourceView
from k8r.problems import Catalog, Detection, Problem, build_catalog


class _AlwaysPod(Problem):
    problem_id = "AlwaysPod"
    short_description = "Always fires on pods"
    kind = ResourceKind.POD

    def check(self, resource: ResourceView, config: CheckupConfig) -> Detection | None:
        return Detection("always")


class _AlwaysPodDuplicate(_AlwaysPod):
    short_description = "Same id, different class"


class TestDefaultCatalog:
    def test_ids_are_unique(self) -> None:
        catalog = build_catalog()
        ids = [p.problem_id for p in catalog]
        assert len(ids) == len(set(ids))

    def test_contains_every_known_problem(self) -> None:
        catalog = build_catalog()
        assert set(catalog.ids) == {
            "PodCrashLoopBackOff",
            "PodNotReady",
            "PodImagePullBackOff",
            "PodOOMKilled",
            "PodPending",
            "HighRestarts",
            "MaxedOutHPAs",
        }

    def test_partitioned_by_kind(self) -> None:
        catalog = build_catalog()
        assert [p.problem_id for p in catalog.for_kind(ResourceKind.HPA)] == ["MaxedOutHPAs"]
        pod_ids = [p.problem_id for p in catalog.for_kind(ResourceKind.POD)]
        assert pod_ids[0] == "PodCrashLoopBackOff"
        assert "MaxedOutHPAs" not in pod_ids
        assert all(p.kind is ResourceKind.POD for p in catalog.for_kind(ResourceKind.POD))

    def test_every_entry_has_a_description(self) -> None:
        for problem in build_catalog():
            assert problem.short_description
            assert problem.resolved_help_url.startswith("https://")

    def test_every_entry_class_is_documented(self) -> None:
        for problem in build_catalog():
            doc = type(problem).__doc__
            assert doc is not None and doc.startswith("Matches "), problem.problem_id


class TestCatalogLookup:
    def test_get_known_and_unknown(self) -> None:
        catalog = build_catalog()
        problem = catalog.get("PodOOMKilled")
        assert problem is not None
        assert problem.problem_id == "PodOOMKilled"
        assert catalog.get("NoSuchProblem") is None

    def test_membership_and_len(self) -> None:
        catalog = Catalog([_AlwaysPod()])
        assert "AlwaysPod" in catalog
        assert "MaxedOutHPAs" not in catalog
        assert len(catalog) == 1

    def test_kind_without_problems_is_empty(self) -> None:
        catalog = Catalog([_AlwaysPod()])
        assert catalog.for_kind(ResourceKind.HPA) == ()

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate problem id: AlwaysPod"):
            Catalog([_AlwaysPod(), _AlwaysPodDuplicate()])
