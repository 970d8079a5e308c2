"""Text rendering of a Report and the resulting process exit status."""

from __future__ import annotations

from typing import TextIO

import click

from k8r.models.report import SEVERITY_ORDER, ResourceRecord, Severity
from k8r.report import Report

EXIT_OK = 0
EXIT_PROBLEMS = 1

_SEVERITY_COLORS = {
    Severity.ERROR: "bright_red",
    Severity.WARNING: "bright_yellow",
}

_INDENT = "    "


def exit_code(report: Report) -> int:
    """0 when the scan produced no records, 1 otherwise."""
    return EXIT_OK if report.is_clean else EXIT_PROBLEMS


def occurrences(count: int) -> str:
    return f"{count} occurrence{'' if count == 1 else 's'}"


def _aligned(rows: list[tuple[str, str]], out: TextIO | None, color: bool | None) -> None:
    """Echo ``- <key> <value>`` rows with values lined up in one column."""
    width = max((len(key) for key, value in rows if value), default=0)
    for key, value in rows:
        line = f"{_INDENT}- {click.style(key, bold=True)}"
        if value:
            line += " " * (width - len(key) + 1) + value
        click.echo(line, file=out, color=color)


def _record_row(record: ResourceRecord) -> tuple[str, str]:
    if not record.detail:
        key, value = record.resource_name, ""
    else:
        key, value = f"{record.resource_name}:", record.detail
    if record.owner:
        suffix = f"(owned by {record.owner})"
        value = f"{value} {suffix}" if value else suffix
    return key, value


def render_report(report: Report, out: TextIO | None = None, color: bool | None = None) -> None:
    """Write ``report`` to ``out`` (stdout by default).

    Problems are grouped by severity, errors first, and within a severity in
    order of first appearance. A help link index follows.
    """
    if report.is_clean:
        click.echo("Everything looks good 🎉", file=out, color=color)
        return

    click.echo("", file=out)
    click.secho("⛔️  Problems found (format: namespace/name <problem>):", file=out, color=color, bold=True)

    by_severity = report.by_severity()
    for severity in SEVERITY_ORDER:
        for problem_id, records in by_severity[severity].items():
            problem = report.get_problem(problem_id)
            if problem is None:
                continue
            click.echo("", file=out)
            heading = click.style(f"{problem_id}: {problem.short_description}", fg=_SEVERITY_COLORS[severity])
            count = click.style(f"[{occurrences(len(records))}]", bold=True)
            click.echo(f"{_INDENT}{heading} {count}", file=out, color=color)
            _aligned([_record_row(r) for r in records], out, color)

    click.echo("", file=out)
    click.secho("💡  More information/help:", file=out, color=color, bold=True)
    rows = [
        (f"{problem.problem_id}:", click.style(problem.resolved_help_url, underline=True))
        for problem in report.problems
    ]
    _aligned(rows, out, color)
