"""Deploy the restart and ping functions and wire up the scheduler job"""

import time
from pathlib import Path
from typing import Any, Callable, Dict, NamedTuple, Optional

import yaml

from ..credentials import mask
from ..errors import DeploymentTimeoutError
from ..gcloud import GcloudClient
from ..naming import ArtifactNames
from ..output import Logger
from .poller import wait_until_active
from .templates import PING_DIR, RESTART_DIR, prepare_deploy_dir, stage_artifact

INSTANCE_ADMIN_ROLE = "roles/compute.instanceAdmin.v1"
SUMMARY_FILE = "deployment.yaml"


class Target(NamedTuple):
    """What to monitor and where to deploy"""

    domain: str
    region: str
    project: str
    vm_ip: str
    slug: str
    names: ArtifactNames


class DeploymentResult(NamedTuple):
    """Everything created by a successful run"""

    deploy_dir: Path
    restart_url: str
    ping_url: str
    scheduler_job: str
    service_account: str


def service_account_for(project: str, configured: str = "") -> str:
    """Resolve the service account email the functions run as"""
    if not configured:
        return f"{project}@appspot.gserviceaccount.com"
    if "@" in configured:
        return configured
    return f"{configured}@{project}.iam.gserviceaccount.com"


class Deployer:
    """Stage templates and run the deployment steps in order"""

    def __init__(
        self,
        gcloud: GcloudClient,
        config: Dict[str, Any],
        logger: Logger,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.gcloud = gcloud
        self.config = config
        self.logger = logger
        self.sleep = sleep or time.sleep

    def deploy_function(
        self,
        name: str,
        entry_point: str,
        runtime: str,
        region: str,
        source: Path,
        project: str,
    ) -> str:
        """Deploy a function, wait for it to become active and return its URL"""
        self.logger.debug(
            f"Deploying cloud function: {name} with runtime {runtime} from folder {source}"
        )
        with self.logger.console.status(f"Deploying {name}..."):
            self.gcloud.deploy_function(name, entry_point, runtime, region, source, project)

        max_wait = self.config["deploy"]["max_wait"]
        interval = self.config["deploy"]["interval"]
        with self.logger.console.status(f"Waiting for {name} to become active..."):
            active = wait_until_active(
                lambda: self.gcloud.function_status(name, region, project),
                max_wait=max_wait,
                interval=interval,
                sleep=self.sleep,
            )
        if not active:
            raise DeploymentTimeoutError(name, max_wait)

        self.logger.debug(f"{name} deployed successfully.")
        url = self.gcloud.function_url(name, region, project)
        self.logger.debug(f"{name} URL: {url}")
        return url

    def run(self, target: Target, password: str) -> DeploymentResult:
        """Run the full deployment for a target"""
        paths = self.config["paths"]
        functions = self.config["functions"]
        templates_root = Path(paths["templates"])
        names = target.names

        self.logger.debug(f"Processed domain: {target.slug}")
        deploy_dir = prepare_deploy_dir(Path(paths["output"]), target.slug)

        self.logger.section("Deploying restart function")
        restart = functions["restart"]
        self.logger.debug("Copying and updating v2 function files...")
        restart_src = stage_artifact(
            templates_root / restart["template_dir"],
            deploy_dir / RESTART_DIR,
            {"YOUR_PROJECT_ID": target.project, "YOUR_STATIC_IP": target.vm_ip},
        )
        restart_url = self.deploy_function(
            names.restart_function,
            restart["entry_point"],
            restart["runtime"],
            target.region,
            restart_src,
            target.project,
        )
        self.logger.success(f"{names.restart_function} deployed")

        self.logger.section("Deploying ping function")
        ping = functions["ping"]
        self.logger.debug("Copying and updating v1 function files...")
        self.logger.debug(f"Using password {mask(password)}")
        ping_src = stage_artifact(
            templates_root / ping["template_dir"],
            deploy_dir / PING_DIR,
            {
                "YOURDOMAIN.COM": target.domain,
                "YOUR_WEBHOOK_URL2": restart_url,
                "YOUR_UNIQUE_PASSWORD": password,
            },
        )
        ping_url = self.deploy_function(
            names.ping_function,
            ping["entry_point"],
            ping["runtime"],
            target.region,
            ping_src,
            target.project,
        )
        self.logger.success(f"{names.ping_function} deployed")

        self.logger.section("Scheduling and permissions")
        self.logger.debug(f"Creating Cloud Scheduler job named {names.scheduler_job}...")
        self.gcloud.create_scheduler_job(
            names.scheduler_job,
            self.config["deploy"]["schedule"],
            ping_url,
            target.region,
            target.project,
        )
        self.logger.success(f"Scheduler job {names.scheduler_job} created")

        self.logger.debug("Setting roles for service account...")
        account = service_account_for(target.project, self.config["deploy"].get("service_account", ""))
        member = f"serviceAccount:{account}"
        self.gcloud.grant_function_invoker(
            names.restart_function, target.region, target.project, member
        )
        self.gcloud.grant_project_role(target.project, member, INSTANCE_ADMIN_ROLE)
        self.logger.success(f"Roles granted to {account}")

        result = DeploymentResult(
            deploy_dir=deploy_dir,
            restart_url=restart_url,
            ping_url=ping_url,
            scheduler_job=names.scheduler_job,
            service_account=account,
        )
        self.write_summary(target, result)
        return result

    def write_summary(self, target: Target, result: DeploymentResult) -> Path:
        """Record what was deployed next to the staged sources"""
        summary = {
            "domain": target.domain,
            "project": target.project,
            "region": target.region,
            "vm_ip": target.vm_ip,
            "functions": {
                target.names.restart_function: result.restart_url,
                target.names.ping_function: result.ping_url,
            },
            "scheduler_job": result.scheduler_job,
            "service_account": result.service_account,
        }
        path = result.deploy_dir / SUMMARY_FILE
        with open(path, "w") as f:
            yaml.safe_dump(summary, f, default_flow_style=False, sort_keys=False)
        return path
