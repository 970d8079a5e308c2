"""k8r: one-shot Kubernetes health check."""

__version__ = "0.1.0"
