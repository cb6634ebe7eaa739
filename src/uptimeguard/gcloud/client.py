"""Thin client for the gcloud commands uptimeguard needs"""

import subprocess
from pathlib import Path
from typing import Callable, List, Optional

from ..errors import CommandError, ResourceNotFoundError
from ..output import Logger

Runner = Callable[..., subprocess.CompletedProcess]


def run_command(
    cmd: List[str], cwd: Optional[Path] = None, check: bool = True
) -> subprocess.CompletedProcess:
    """Run a command and return the result."""
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=False)
    except FileNotFoundError:
        raise CommandError(cmd, 127, f"{cmd[0]}: command not found")

    if check and result.returncode != 0:
        raise CommandError(cmd, result.returncode, result.stderr or "")

    return result


def _lines(output: str) -> List[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


class GcloudClient:
    """gcloud operations for projects, VMs, functions, scheduler and IAM"""

    def __init__(self, runner: Optional[Runner] = None, logger: Optional[Logger] = None):
        self.runner = runner or run_command
        self.logger = logger or Logger()

    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        cmd = ["gcloud"] + args
        self.logger.debug(f"Running: {' '.join(cmd)}")
        return self.runner(cmd, check=check)

    def list_projects(self) -> List[str]:
        """List project IDs visible to the active account"""
        result = self._run(["projects", "list", "--format=value(projectId)"])
        projects = _lines(result.stdout)
        if not projects:
            raise ResourceNotFoundError(
                "No Google Cloud projects found. Please create a project first."
            )
        return projects

    def list_vm_ips(self, project: str) -> List[str]:
        """List external IPs of the VMs in a project"""
        result = self._run(
            [
                "compute",
                "instances",
                "list",
                "--project",
                project,
                "--format=value(networkInterfaces[0].accessConfigs[0].natIP)",
            ]
        )
        ips = _lines(result.stdout)
        if not ips:
            raise ResourceNotFoundError(
                "No Virtual Machines with external IPs found in the selected project."
            )
        return ips

    def deploy_function(
        self,
        name: str,
        entry_point: str,
        runtime: str,
        region: str,
        source: Path,
        project: str,
    ) -> None:
        """Deploy an HTTP-triggered function from a source directory"""
        self._run(
            [
                "functions",
                "deploy",
                name,
                "--entry-point",
                entry_point,
                "--runtime",
                runtime,
                "--trigger-http",
                "--allow-unauthenticated",
                "--no-gen2",
                "--quiet",
                "--region",
                region,
                "--source",
                str(source),
                "--project",
                project,
            ]
        )

    def function_status(self, name: str, region: str, project: str) -> str:
        """Get a function's deployment status, empty when it cannot be described"""
        result = self._run(
            [
                "functions",
                "describe",
                name,
                "--region",
                region,
                "--project",
                project,
                "--format=value(status)",
            ],
            check=False,
        )
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def function_url(self, name: str, region: str, project: str) -> str:
        """Get a function's HTTPS trigger URL"""
        result = self._run(
            [
                "functions",
                "describe",
                name,
                "--region",
                region,
                "--project",
                project,
                "--format=value(httpsTrigger.url)",
            ]
        )
        return result.stdout.strip()

    def create_scheduler_job(
        self, name: str, schedule: str, uri: str, region: str, project: str
    ) -> None:
        """Create an HTTP scheduler job"""
        self._run(
            [
                "scheduler",
                "jobs",
                "create",
                "http",
                name,
                f"--schedule={schedule}",
                f"--uri={uri}",
                "--message-body={}",
                "--quiet",
                "--location",
                region,
                "--project",
                project,
            ]
        )

    def grant_function_invoker(
        self, function: str, region: str, project: str, member: str
    ) -> None:
        """Allow a member to invoke a function"""
        self._run(
            [
                "functions",
                "add-iam-policy-binding",
                function,
                f"--region={region}",
                f"--project={project}",
                f"--member={member}",
                "--role=roles/cloudfunctions.invoker",
                "--quiet",
            ]
        )

    def grant_project_role(self, project: str, member: str, role: str) -> None:
        """Bind a role to a member on the project"""
        self._run(
            [
                "projects",
                "add-iam-policy-binding",
                project,
                f"--member={member}",
                f"--role={role}",
                "--quiet",
            ]
        )
