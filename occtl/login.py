"""Hand the terminal over to the external login tool.

Two strategies exist. Where the platform supports it the current process image
is replaced by ``oc login``; elsewhere the tool is spawned and its exit code
becomes ours. In both cases control does not come back on success.
"""
import logging
import os
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from .config import Config
from .exceptions import InvocationError
from .logging import get_logger

logger = get_logger(__name__)


def build_login_command(binary: str, url: str, username: str) -> List[str]:
    return [binary, "login", url, "-u", username]


class LoginInvoker(ABC):
    """Runs the login tool against a cluster."""

    def __init__(self, binary: Optional[str] = None):
        self.binary = binary or Config.LOGIN_BINARY

    @abstractmethod
    def invoke(self, url: str, username: str) -> None:
        """Log into url as username. Does not return on success.

        Raises:
            InvocationError: If the login tool cannot be started
        """


class ExecLoginInvoker(LoginInvoker):
    """Replaces the current process with the login tool."""

    def invoke(self, url: str, username: str) -> None:
        cmd = build_login_command(self.binary, url, username)
        logger.debug(f"Exec: {' '.join(cmd)}")

        # Nothing buffered survives exec
        for handler in logging.getLogger().handlers:
            handler.flush()
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            os.execvp(cmd[0], cmd)
        except OSError as e:
            raise InvocationError(cmd, e.strerror or str(e)) from e


class SpawnLoginInvoker(LoginInvoker):
    """Runs the login tool as a child and exits with its return code."""

    def invoke(self, url: str, username: str) -> None:
        cmd = build_login_command(self.binary, url, username)
        logger.debug(f"Spawn: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise InvocationError(cmd, e.strerror or str(e)) from e
        logger.debug(f"{cmd[0]} exited with {result.returncode}")
        sys.exit(result.returncode)


def get_invoker(strategy: Optional[str] = None, binary: Optional[str] = None) -> LoginInvoker:
    """Pick the login strategy.

    Args:
        strategy: "exec", "spawn" or "auto" (default: Config.LOGIN_STRATEGY)
        binary: Login tool to run (default: Config.LOGIN_BINARY)

    Returns:
        LoginInvoker instance
    """
    strategy = (strategy or Config.LOGIN_STRATEGY).lower()
    if strategy == "auto":
        strategy = "exec" if os.name == "posix" and hasattr(os, "execvp") else "spawn"
    if strategy == "exec":
        return ExecLoginInvoker(binary)
    if strategy == "spawn":
        return SpawnLoginInvoker(binary)
    raise ValueError(f"Unknown login strategy: {strategy}")
