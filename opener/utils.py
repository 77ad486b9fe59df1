"""Output helpers shared by the CLI commands."""

import click

from .config import get_verbosity


def log_info(message: str) -> None:
    """Print at normal verbosity (level >= 1)."""
    if get_verbosity() >= 1:
        click.echo(message)


def log_verbose(message: str) -> None:
    """Print at verbose level (level >= 2)."""
    if get_verbosity() >= 2:
        click.echo(message)


def log_debug(message: str) -> None:
    """Print debug internals to stderr (level >= 3)."""
    if get_verbosity() >= 3:
        click.echo(click.style(f"[debug] {message}", dim=True), err=True)


def log_warning(message: str) -> None:
    click.echo(click.style(message, fg="yellow"), err=True)


def log_error(message: str) -> None:
    """Errors always go to stderr, regardless of verbosity."""
    click.echo(click.style(message, fg="red"), err=True)


def format_project(project) -> str:
    """One-line label for a project: name plus dimmed company."""
    if project.company:
        return f"{project.name} {click.style(f'({project.company})', dim=True)}"
    return project.name
