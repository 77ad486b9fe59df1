"""Scan a directory for projects and add the selected ones."""

import click

from ..completions import complete_company
from ..prompts import ask_text, choose_many
from ..utils import log_info, log_verbose
from . import pass_service


@click.command()
@click.argument("directory", required=False, type=click.Path(file_okay=False))
@click.option("--company", "-c", help="Assign found projects to a company", shell_complete=complete_company)
@pass_service
def scan(service, directory: str | None, company: str | None):
    """Find project folders in DIRECTORY (default: the base path).

    A sub-directory counts as a project if it contains .git, package.json,
    composer.json, .vscode, pom.xml, Cargo.toml or go.mod.
    """
    root = service.resolve_path(directory or service.registry.base_path)
    log_info(click.style(f"Scanning {root} for projects...", fg="cyan"))

    try:
        _, found = service.scan(root)
    except OSError as e:
        raise click.ClickException(f"Error scanning for projects: {e}") from e

    if not found:
        log_info(click.style("No projects found in the specified directory.", fg="yellow"))
        return

    log_info(click.style(f"Found {len(found)} projects:", fg="green"))
    selected = choose_many(found, "Select projects to add", label=lambda p: f"{p.name} ({p.path})")
    if not selected:
        log_info(click.style("No projects selected.", fg="yellow"))
        return

    if not company:
        company = ask_text("Company name (optional)") or None

    for project in selected:
        created = service.add_project(project.name, project.path, company)
        verb = "Added" if created else "Updated"
        log_info(click.style(f"{verb} project: {project.name}", fg="green"))
    log_verbose("Configuration saved.")
    log_info(click.style("Scan complete!", fg="green"))
