"""Settings commands: editor command, base path and verbosity."""

import click

from ..config import set_verbosity
from ..errors import PathNotFoundError
from ..utils import log_info, log_verbose
from . import pass_service


@click.command(name="set-vscode-cmd")
@click.argument("command")
@pass_service
def set_vscode_cmd(service, command: str):
    """Set the command used to open projects (default: code).

    The project path is appended as the last argument.

    Examples:
        project-opener set-vscode-cmd code-insiders
        project-opener set-vscode-cmd "idea --wait"
    """
    service.set_editor_command(command)
    log_info(click.style(f"VSCode command set to: {command}", fg="green"))
    log_verbose("Configuration saved.")


@click.command(name="set-base-path")
@click.argument("path")
@pass_service
def set_base_path(service, path: str):
    """Set the default directory for scan. It must exist."""
    try:
        absolute_path = service.set_base_path(path)
    except PathNotFoundError as e:
        raise click.ClickException(str(e)) from e
    log_info(click.style(f"Projects base path set to: {absolute_path}", fg="green"))
    log_verbose("Configuration saved.")


@click.command(name="set-verbosity")
@click.argument("level", type=click.IntRange(0, 3))
def set_verbosity_cmd(level: int):
    """Set output verbosity: 0 silent, 1 normal, 2 verbose, 3 debug."""
    set_verbosity(level)
    log_info(click.style(f"Verbosity set to: {level}", fg="green"))
