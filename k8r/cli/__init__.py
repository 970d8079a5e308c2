"""k8r command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``k8r`` script).
"""

from k8r.cli.main import cli

__all__ = ["cli"]
