"""Shared fixtures for k8r tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

_ENV_KEYS = ("RESTART_THRESHOLD", "KUBECONFIG", "CONTEXT", "LOG_LEVEL", "LOG_FORMAT")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's K8R_* settings out of the tests."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(f"K8R_{key}", raising=False)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """CLI tests configure structlog against CliRunner streams; undo that."""
    yield
    structlog.reset_defaults()
