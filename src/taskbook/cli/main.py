# src/taskbook/cli/main.py

"""
CLI entrypoint.

Builds settings, initializes logging, then runs exactly one command
against the task file and exits with the command's status code.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import click

from .. import __version__
from ..config import Settings
from ..tasks.errors import TaskError
from .bootstrap import configure_logging
from .commands import registry, run_command
from .render import format_tasks

logger = logging.getLogger(__name__)


def _run(ctx: click.Context, name: str, **params: str | None) -> None:
    settings: Settings = ctx.obj
    try:
        result = run_command(name, params, settings=settings)
    except TaskError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(exc.exit_code)

    if result.message is not None:
        click.echo(result.message)
    if result.tasks is not None:
        click.echo(format_tasks(result.tasks))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--file",
    "tasks_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Task file to use (default: $TASKBOOK_TASKS_PATH or ./tasks.json).",
)
@click.version_option(__version__, prog_name="taskbook")
@click.pass_context
def cli(ctx: click.Context, tasks_file: Path | None) -> None:
    """A console-based task management application."""
    settings = Settings.from_env()
    if tasks_file is not None:
        settings = dataclasses.replace(settings, tasks_path=tasks_file)

    configure_logging(settings)
    logger.debug("Starting %s (tasks=%s)", settings.app_name, settings.tasks_path)
    ctx.obj = settings


@cli.command("add", help=registry.help_text("add"))
@click.argument("title")
@click.argument("description")
@click.argument("priority")
@click.argument("status")
@click.argument("project")
@click.pass_context
def add_cmd(
    ctx: click.Context, title: str, description: str, priority: str, status: str, project: str
) -> None:
    _run(
        ctx,
        "add",
        title=title,
        description=description,
        priority=priority,
        status=status,
        project=project,
    )


@cli.command("remove", help=registry.help_text("remove"))
@click.argument("title")
@click.pass_context
def remove_cmd(ctx: click.Context, title: str) -> None:
    _run(ctx, "remove", title=title)


@cli.command("list", help=registry.help_text("list"))
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    _run(ctx, "list")


@cli.command("list-by-project", help=registry.help_text("list-by-project"))
@click.option("--project", required=True, help="Project name to match exactly.")
@click.pass_context
def list_by_project_cmd(ctx: click.Context, project: str) -> None:
    _run(ctx, "list-by-project", project=project)


@cli.command("list-by-status", help=registry.help_text("list-by-status"))
@click.option("--status", required=True, help="Status to match exactly.")
@click.pass_context
def list_by_status_cmd(ctx: click.Context, status: str) -> None:
    _run(ctx, "list-by-status", status=status)


@cli.command("list-by-priority", help=registry.help_text("list-by-priority"))
@click.option("--priority", required=True, help="Priority number to match.")
@click.pass_context
def list_by_priority_cmd(ctx: click.Context, priority: str) -> None:
    _run(ctx, "list-by-priority", priority=priority)


@cli.command("search", help=registry.help_text("search"))
@click.argument("query")
@click.pass_context
def search_cmd(ctx: click.Context, query: str) -> None:
    _run(ctx, "search", query=query)


@cli.command("update", help=registry.help_text("update"))
@click.argument("title")
@click.option("--description", default=None, help="New description.")
@click.option("--priority", default=None, help="New priority.")
@click.option("--status", default=None, help="New status.")
@click.option("--project", default=None, help="New project.")
@click.pass_context
def update_cmd(
    ctx: click.Context,
    title: str,
    description: str | None,
    priority: str | None,
    status: str | None,
    project: str | None,
) -> None:
    _run(
        ctx,
        "update",
        title=title,
        description=description,
        priority=priority,
        status=status,
        project=project,
    )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
