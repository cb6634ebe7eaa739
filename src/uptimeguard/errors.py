"""Exceptions raised by uptimeguard"""

from typing import List, Optional


class UptimeGuardError(Exception):
    """Base exception for uptimeguard errors"""

    pass


class CommandError(UptimeGuardError):
    """An external command exited with a non-zero status"""

    def __init__(self, cmd: List[str], returncode: int, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed ({returncode}): {' '.join(cmd)}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)


class ResourceNotFoundError(UptimeGuardError):
    """A listing returned no usable resources"""

    pass


class DeploymentTimeoutError(UptimeGuardError):
    """A function did not become active within the poll ceiling"""

    def __init__(self, name: str, max_wait: Optional[float] = None):
        self.name = name
        self.max_wait = max_wait
        message = f"Deployment of {name} timed out."
        if max_wait is not None:
            message = f"Deployment of {name} timed out after {max_wait:g} seconds."
        super().__init__(message)


class TemplateError(UptimeGuardError):
    """An artifact template is missing or unreadable"""

    pass
