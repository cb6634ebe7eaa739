"""Artifact staging and Cloud Functions deployment."""

from .deployer import Deployer, DeploymentResult, Target
from .poller import wait_until_active
from .templates import prepare_deploy_dir, stage_artifact

__all__ = [
    "Deployer",
    "DeploymentResult",
    "Target",
    "prepare_deploy_dir",
    "stage_artifact",
    "wait_until_active",
]
