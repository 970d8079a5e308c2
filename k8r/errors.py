"""Exception hierarchy for k8r."""

from __future__ import annotations


class K8rError(Exception):
    """Base class for all k8r errors."""


class ConfigError(K8rError, ValueError):
    """Raised when a K8R_* setting has an invalid value."""


class ClusterAccessError(K8rError):
    """Raised when the cluster client cannot be built or a listing fails.

    Always fatal: the run aborts before any scan happens.
    """
