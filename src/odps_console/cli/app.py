"""CLI main module for the console."""

from __future__ import annotations

from typing import Optional

import typer

from odps_console.cli.shell import execute_statement, parse_statement, run_shell
from odps_console.client.base import ServiceClient
from odps_console.client.rest import RestServiceClient
from odps_console.config import Settings, load_settings
from odps_console.core.matcher import CommandMatcher
from odps_console.errors import ConfigurationError
from odps_console.logging_utils import LogProfile, configure_logging
from odps_console.render import Renderer
from odps_console.session import SessionContext
from odps_console.usage import usage_lines

app = typer.Typer(
    name="odps-console",
    help="Console for projects, tables and online models.",
    add_completion=False,
)


def build_client(settings: Settings) -> ServiceClient:
    """Create the service client used for one CLI invocation."""
    return RestServiceClient.from_settings(settings)


def _close(client: ServiceClient) -> None:
    close = getattr(client, "close", None)
    if callable(close):
        close()


def _prepare(project: Optional[str], profile: LogProfile) -> tuple[Settings, CommandMatcher]:
    settings = load_settings()
    try:
        configure_logging(profile=profile, level=settings.log_level)
    except ConfigurationError as exc:
        Renderer().error(str(exc))
        raise typer.Exit(1) from exc
    session = SessionContext(default_project_name=settings.project).with_project(project)
    return settings, CommandMatcher(session)


@app.command()
def run(
    command: str = typer.Argument(..., help="Command text, e.g. \"show tables like 'tmp%'\""),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Default project for this command"),
) -> None:
    """Run a single console command."""
    settings, matcher = _prepare(project, "default")
    renderer = Renderer()
    parsed = parse_statement(command, matcher, renderer)
    if parsed is None:
        raise typer.Exit(1)

    try:
        client = build_client(settings)
    except ConfigurationError as exc:
        renderer.error(str(exc))
        raise typer.Exit(1) from exc

    try:
        ok = execute_statement(parsed, client, renderer)
    finally:
        _close(client)
    if not ok:
        raise typer.Exit(1)


@app.command()
def shell(
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Default project for the session"),
) -> None:
    """Start an interactive console session."""
    settings, matcher = _prepare(project, "shell")
    renderer = Renderer()
    try:
        client = build_client(settings)
    except ConfigurationError as exc:
        renderer.error(str(exc))
        raise typer.Exit(1) from exc

    try:
        run_shell(matcher, client, renderer)
    finally:
        _close(client)


@app.command("help")
def help_(keywords: Optional[list[str]] = typer.Argument(None, help="Filter usage by keywords")) -> None:
    """Show command usage."""
    lines = usage_lines(keywords or [])
    if not lines:
        typer.echo(f"No command matches: {' '.join(keywords or [])}")
        raise typer.Exit(1)
    for line in lines:
        typer.echo(line)


if __name__ == "__main__":
    app()
