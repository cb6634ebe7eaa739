"""Local prerequisite checks for uptimeguard."""

from .prereqs import REQUIRED_TOOLS, check_prerequisites, missing_prerequisites

__all__ = [
    "REQUIRED_TOOLS",
    "check_prerequisites",
    "missing_prerequisites",
]
