"""Registry management commands (add, remove, list, companies, open, go)."""

import sys

import click

from ..completions import complete_company, complete_project
from ..core.paths import path_exists
from ..errors import LaunchError
from ..utils import log_error, log_info, log_verbose, log_warning
from . import EMPTY_REGISTRY_HINT, pass_service


def open_project(service, project) -> None:
    """Launch the editor on a project, reporting failures."""
    log_verbose(click.style(f"Running: {service.launch_command(project)}", dim=True))
    try:
        service.open_project(project)
    except LaunchError as e:
        raise click.ClickException(f"Error opening project: {e}") from e
    log_info(click.style(f"Opening project: {project.name}", fg="green"))


@click.command()
@click.argument("name")
@click.argument("path")
@click.option("--company", "-c", help="Assign to a company", shell_complete=complete_company)
@pass_service
def add(service, name: str, path: str, company: str | None):
    """Add a project, or update an existing one with the same name.

    PATH may be absolute, relative to the current directory, or start with ~.

    Examples:
        project-opener add api ~/work/api
        project-opener add web . --company acme
    """
    absolute_path = service.resolve_path(path)

    if not path_exists(absolute_path):
        log_warning(f"Warning: Path does not exist: {absolute_path}")
        if not click.confirm("Continue anyway?", default=False):
            log_info(click.style("Project not added.", fg="yellow"))
            return

    created = service.add_project(name, absolute_path, company)
    verb = "Added" if created else "Updated"
    log_info(click.style(f"{verb} project: {name}", fg="green"))
    log_verbose("Configuration saved.")


@click.command()
@click.argument("name", shell_complete=complete_project)
@pass_service
def remove(service, name: str):
    """Remove a project from the registry."""
    if service.remove_project(name) is None:
        log_info(click.style(f"Project not found: {name}", fg="yellow"))
        return
    log_info(click.style(f"Removed project: {name}", fg="green"))
    log_verbose("Configuration saved.")


@click.command(name="list")
@click.option("--company", "-c", help="Filter by company", shell_complete=complete_company)
@pass_service
def list_projects(service, company: str | None):
    """List configured projects grouped by company."""
    if not len(service.registry):
        log_info(click.style(EMPTY_REGISTRY_HINT, fg="yellow"))
        return

    groups = service.grouped_projects(company)
    if not groups:
        log_info(click.style(f"No projects found for company: {company}", fg="yellow"))
        return

    click.echo(click.style("\nConfigured Projects:", bold=True))
    click.echo(click.style("-------------------", dim=True))
    for group, projects in groups.items():
        click.echo(click.style(f"\n{group or 'No Company'}:", fg="cyan"))
        for project in projects:
            click.echo(f"  {click.style(project.name, fg='green')}")
            click.echo(f"    {click.style(f'Path: {project.path}', dim=True)}")
    click.echo()


@click.command()
@pass_service
def companies(service):
    """List all companies with their project counts."""
    counts = service.company_counts()
    if not counts:
        log_info(click.style("No companies configured.", fg="yellow"))
        return

    click.echo(click.style("\nCompanies:", bold=True))
    click.echo(click.style("----------", dim=True))
    for company, count in counts.items():
        click.echo(f"{click.style(company, fg='cyan')} {click.style(f'({count} projects)', dim=True)}")
    click.echo()


@click.command(name="open")
@click.argument("name", shell_complete=complete_project)
@pass_service
def open_cmd(service, name: str):
    """Open a project in the editor by exact name."""
    project = service.get(name)
    if project is None:
        log_info(click.style(f"Project not found: {name}", fg="yellow"))
        return
    open_project(service, project)


@click.command()
@click.argument("name", shell_complete=complete_project)
@pass_service
def go(service, name: str):
    """Print the path of a project, for use with cd.

    Exits with status 1 if the project is unknown.

    Examples:
        cd "$(project-opener go api)"
    """
    project = service.get(name)
    if project is None:
        # stdout stays clean for shell integrations
        log_error(f"Project not found: {name}")
        sys.exit(1)
    click.echo(project.path)
