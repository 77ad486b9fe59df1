"""Search commands: one-shot substring search and interactive fuzzy search."""

import click

from ..completions import complete_company
from ..prompts import choose_one, confirm, show_numbered
from ..search import MultipleMatches, NoMatch, SingleMatch
from ..utils import format_project, log_debug, log_info
from . import EMPTY_REGISTRY_HINT, pass_service
from .projects import open_project

ALL_COMPANIES = "All Companies"
MAX_SHOWN = 15


@click.command()
@click.argument("query")
@click.option("--company", "-c", help="Filter by company", shell_complete=complete_company)
@pass_service
def search(service, query: str, company: str | None):
    """Search projects by name, path or company and open one.

    A single match asks for confirmation; several matches ask which one.

    Examples:
        project-opener search api
        project-opener search web -c acme
    """
    outcome = service.search(query, company)

    if isinstance(outcome, NoMatch):
        log_info(click.style("No matching projects found.", fg="yellow"))
        return

    if isinstance(outcome, SingleMatch):
        log_info(click.style(f"Found one match: {outcome.project.name}", fg="green"))
        if confirm("Open this project?", default=True):
            open_project(service, outcome.project)
        return

    log_info(click.style(f"Found {len(outcome.projects)} matches:", fg="green"))
    project = choose_one(outcome.projects, "Select a project to open", label=format_project)
    if project is None:
        log_info("Nothing selected.")
        return
    open_project(service, project)


def _choose_company(service) -> str | None:
    companies = service.registry.companies()
    if not companies:
        return None
    click.echo("Filter by company:")
    choice = choose_one([ALL_COMPANIES, *companies], "Company", default=1)
    if choice in (None, ALL_COMPANIES):
        return None
    return choice


def _read_selection(service, company: str | None):
    """Narrow the project list query by query until one is picked.

    Returns the chosen project, or NoMatch(abandoned=True).
    """
    query = ""
    while True:
        matches = service.fuzzy_search(query, company)
        log_debug(f"query={query!r} matches={len(matches)}")

        if matches:
            show_numbered(matches[:MAX_SHOWN], format_project)
            if len(matches) > MAX_SHOWN:
                click.echo(click.style(f"  ... {len(matches) - MAX_SHOWN} more, keep typing", dim=True))
        else:
            click.echo(click.style("  No matches.", fg="yellow"))

        entry = click.prompt(
            "Search (number to open, empty to quit)", default="", show_default=False
        ).strip()

        if entry in ("", "q"):
            return NoMatch(abandoned=True)

        if entry.isdigit() and matches:
            outcome = MultipleMatches(tuple(matches[:MAX_SHOWN]))
            try:
                return outcome.choose(int(entry) - 1)
            except IndexError:
                # not a listed number, so search for it by name
                log_debug(f"{entry!r} is not a listed number, searching for it")

        query = entry


@click.command()
@pass_service
def interactive(service):
    """Fuzzy-search projects interactively and open the chosen one.

    Pick a company filter first (if any companies exist), then type part of
    a project name. Each query narrows the list; enter a listed number to
    open it. Any other number is searched for as a name.
    """
    if not len(service.registry):
        log_info(click.style(EMPTY_REGISTRY_HINT, fg="yellow"))
        return

    company = _choose_company(service)
    result = _read_selection(service, company)
    if isinstance(result, NoMatch):
        log_info("Nothing selected.")
        return
    open_project(service, result)
