"""Entry point for `python -m k8r`.

Usage:
    python -m k8r
    python -m k8r checkup --restart-threshold 5
"""

from __future__ import annotations

from k8r.cli import cli

cli(prog_name="k8r")
