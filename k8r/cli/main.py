"""Click entry point for the ``k8r`` command."""

from __future__ import annotations

import asyncio

import click

from k8r import __version__
from k8r.app import run_checkup
from k8r.config import LOG_LEVELS, load_config
from k8r.errors import ClusterAccessError, ConfigError
from k8r.models.config import CheckupConfig, K8rConfig
from k8r.observability.logging import LOG_FORMATS, get_logger, setup_logging
from k8r.problems import build_catalog
from k8r.render import exit_code, render_report

EXIT_FATAL = 2

_logger = get_logger("cli")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="k8r")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for stderr output (env: K8R_LOG_LEVEL).",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    default=None,
    help="Log renderer (env: K8R_LOG_FORMAT).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_format: str | None) -> None:
    """Kubedoctor. A program to help diagnose issues with Kubernetes clusters.

    Runs ``checkup`` when no command is given.
    """
    try:
        config = load_config()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc

    if log_level:
        config.log.level = log_level.lower()
    if log_format:
        config.log.format = log_format.lower()
    setup_logging(config.log.level, config.log.format)

    ctx.obj = config
    if ctx.invoked_subcommand is None:
        ctx.invoke(checkup)


@cli.command()
@click.option(
    "--restart-threshold",
    type=click.IntRange(min=1),
    default=None,
    help="Sets the restart threshold for the HighRestarts problem (default: 3, env: K8R_RESTART_THRESHOLD).",
)
@click.option(
    "--kubeconfig",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a kubeconfig file (env: K8R_KUBECONFIG).",
)
@click.option("--context", "kube_context", default=None, help="Kubeconfig context to use (env: K8R_CONTEXT).")
@click.pass_context
def checkup(
    ctx: click.Context,
    restart_threshold: int | None,
    kubeconfig: str | None,
    kube_context: str | None,
) -> None:
    """Check the cluster for known problems."""
    config: K8rConfig = ctx.obj
    if restart_threshold is not None:
        config.checkup = CheckupConfig(restart_threshold=restart_threshold)
    if kubeconfig:
        config.kube.kubeconfig = kubeconfig
    if kube_context:
        config.kube.context = kube_context

    def _scan_started() -> None:
        click.secho("Checking for problems ... ", bold=True, nl=False)

    try:
        report = asyncio.run(run_checkup(config, on_scan_start=_scan_started))
    except ClusterAccessError as exc:
        _logger.debug("checkup_failed", error=str(exc))
        click.secho(f"Error: {exc}", err=True, fg="red")
        ctx.exit(EXIT_FATAL)

    click.secho("done", bold=True)
    render_report(report)
    ctx.exit(exit_code(report))


@cli.command()
def problems() -> None:
    """List the problems a checkup looks for."""
    for problem in build_catalog():
        click.echo(f"{click.style(problem.problem_id, bold=True)} ({problem.kind.value})")
        click.echo(f"    {problem.short_description}")
        click.echo(f"    {problem.resolved_help_url}")
