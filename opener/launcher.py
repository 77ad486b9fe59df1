"""Start the configured editor on a project directory."""

import shlex
import subprocess

from .errors import LaunchError


def build_command(command: str, path: str) -> list[str]:
    """Split the configured command and append the path as its last argument."""
    args = shlex.split(command)
    if not args:
        raise LaunchError("Editor command is empty. Set one with: project-opener set-vscode-cmd <command>")
    return [*args, path]


def launch(command: str, path: str) -> None:
    """Run the editor command; raises LaunchError with the underlying message."""
    args = build_command(command, path)
    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except OSError as e:
        raise LaunchError(str(e)) from e
    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit status {result.returncode}"
        raise LaunchError(f"{shlex.join(args)}: {detail}")
