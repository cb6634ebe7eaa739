"""Wrapper around the gcloud command-line interface."""

from .client import GcloudClient, run_command

__all__ = ["GcloudClient", "run_command"]
