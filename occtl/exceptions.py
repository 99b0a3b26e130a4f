"""Exceptions raised by occtl."""
from typing import List


class OcctlError(Exception):
    """Base class for errors reported to the user."""
    pass


class NotFoundError(OcctlError):
    """Raised when a cluster name is not in the config file."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Cluster with name {name} not found in config file, "
            "consider adding arguments --username and --cluster-url to save it"
        )


class PersistenceError(OcctlError):
    """Raised when the config file cannot be read or written."""
    pass


class InvocationError(OcctlError):
    """Raised when the login tool cannot be started."""

    def __init__(self, command: List[str], reason: str):
        self.command = command
        super().__init__(f"Failed to run '{' '.join(command)}': {reason}")
