"""Entry point for the project-opener CLI."""

import click

from . import __version__
from .commands import (
    add,
    companies,
    go,
    interactive,
    list_projects,
    open_cmd,
    remove,
    scan,
    search,
    set_base_path,
    set_verbosity_cmd,
    set_vscode_cmd,
)
from .config import get_registry_path
from .core.registry import Registry
from .errors import OpenerError, RegistryLoadError, RegistrySaveError
from .service import RegistryService
from .utils import log_debug, log_error


class OpenerGroup(click.Group):
    """Turns uncaught OpenerErrors into clean CLI errors."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except OpenerError as e:
            raise click.ClickException(str(e)) from e


def load_service() -> RegistryService:
    """Load the registry, falling back to defaults if the file is unusable."""
    path = get_registry_path()
    log_debug(f"Registry file: {path}")
    try:
        return RegistryService.load(path)
    except RegistryLoadError as e:
        log_error(f"Error loading configuration: {e}")
    except RegistrySaveError as e:
        log_error(f"Error saving configuration: {e}")
    return RegistryService(Registry(), path)


@click.group(cls=OpenerGroup, invoke_without_command=True)
@click.version_option(__version__, prog_name="project-opener")
@click.pass_context
def cli(ctx):
    """Quickly find and open projects in your editor.

    Run without a command to search interactively.
    """
    ctx.obj = load_service()
    if ctx.invoked_subcommand is None:
        ctx.invoke(interactive)


cli.add_command(add)
cli.add_command(remove)
cli.add_command(list_projects)
cli.add_command(companies)
cli.add_command(search)
cli.add_command(open_cmd)
cli.add_command(go)
cli.add_command(set_vscode_cmd)
cli.add_command(set_base_path)
cli.add_command(set_verbosity_cmd)
cli.add_command(scan)
cli.add_command(interactive)
cli.add_command(interactive, name="i")
