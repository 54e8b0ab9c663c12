#!/usr/bin/env python3
"""
Command-line interface for ide-recent-projects.

Provides commands to list, search and locate recently opened IDE projects.
"""

from __future__ import annotations

import asyncio
import json
import traceback
from collections.abc import Sequence

import typer

from recent_projects.cli.logger import CLILogger
from recent_projects.config.settings import settings
from recent_projects.exceptions import RecentProjectsError
from recent_projects.schemas.models import HostEnvironment, RecentProject
from recent_projects.services.history import HistoryAggregator
from recent_projects.services.locator import StorageLocator

app = typer.Typer(
    name='recent-projects',
    help='List recently opened projects across VS Code-family IDEs',
    add_completion=False,
)


def _print_version(value: bool) -> None:
    """Eager --version callback."""
    if value:
        typer.echo(f'{settings.APP_NAME} {settings.VERSION}')
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, '--version', help='Show version and exit', callback=_print_version, is_eager=True
    ),
) -> None:
    """List recently opened projects across VS Code-family IDEs."""


@app.command('list')
def list_projects(
    as_json: bool = typer.Option(False, '--json', help='Output JSON'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """List every recent project, deduplicated across IDEs."""
    asyncio.run(_search_async('', as_json, verbose))


@app.command()
def search(
    query: str = typer.Argument(..., help='Case-insensitive substring of the project name or path'),
    as_json: bool = typer.Option(False, '--json', help='Output JSON'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """List recent projects whose name or path contains QUERY."""
    asyncio.run(_search_async(query, as_json, verbose))


@app.command()
def locate(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Show every candidate path'),
) -> None:
    """Show which storage file each IDE provider reads."""
    asyncio.run(_locate_async(verbose))


async def _search_async(query: str, as_json: bool, verbose: bool) -> None:
    """Async implementation of list and search commands."""
    logger = CLILogger(verbose=verbose)

    try:
        aggregator = HistoryAggregator(logger=logger)
        projects = await aggregator.search(query)
    except (RecentProjectsError, FileNotFoundError) as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        await logger.error(f'Failed to collect recent projects: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    _print_projects(projects, as_json)


async def _locate_async(verbose: bool) -> None:
    """Async implementation of locate command."""
    logger = CLILogger(verbose=verbose)
    host = HostEnvironment.from_system()

    if not host.is_supported:
        typer.secho(f'Unsupported platform: {host.platform}', fg=typer.colors.YELLOW, err=True)

    locator = StorageLocator(logger)
    for provider in HistoryAggregator(host=host, logger=logger).providers:
        storage_path = await locator.locate(provider.layout, host)
        if storage_path:
            typer.echo(f'{provider.id}: {storage_path}')
        else:
            typer.secho(f'{provider.id}: not found', fg=typer.colors.YELLOW)

        if verbose:
            for candidate in locator.candidate_paths(provider.layout, host):
                typer.echo(f'  - {candidate}')


def _print_projects(projects: Sequence[RecentProject], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps([p.model_dump() for p in projects], indent=2, ensure_ascii=False))
        return

    if not projects:
        typer.secho('No recent projects found.', fg=typer.colors.YELLOW)
        return

    for project in projects:
        typer.echo(f'{project.name}  {project.path}  [{project.source}]')


if __name__ == '__main__':
    app()
