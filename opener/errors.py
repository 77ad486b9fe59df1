"""Exceptions raised by project-opener."""


class OpenerError(Exception):
    """Base class for project-opener errors."""


class RegistryLoadError(OpenerError):
    """The registry file exists but could not be read or parsed."""


class RegistrySaveError(OpenerError):
    """The registry file could not be written."""


class LaunchError(OpenerError):
    """The editor command failed to start or exited with an error."""


class PathNotFoundError(OpenerError):
    """A path that must exist does not."""
