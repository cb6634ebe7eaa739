"""Interactive prompts that collect the monitoring target"""

from typing import Any, Dict, List, Optional

import click

from ..deploy import Target
from ..gcloud import GcloudClient
from ..naming import artifact_names, domain_slug, is_valid_domain
from ..output import Logger

INTRO = (
    "This script will create Google Cloud functions that ping your server "
    "and auto restart it if there are issues."
)


def confirm_start() -> bool:
    """Explain what will happen and ask to proceed"""
    click.echo(INTRO)
    return click.confirm("Shall we proceed?", default=False)


def _domain_value(text: str) -> str:
    text = text.strip()
    if not is_valid_domain(text):
        raise click.BadParameter("Please enter the URL with http:// or https://")
    return text


def prompt_domain() -> str:
    """Ask for the domain until a valid one is confirmed"""
    while True:
        domain = click.prompt(
            "Enter the domain to monitor (http://yourdomain.com)",
            value_proc=_domain_value,
        )
        if click.confirm(f"Monitor {domain}?", default=True):
            return domain


def choose(title: str, options: List[str], labels: Optional[List[str]] = None) -> str:
    """Show a numbered menu and return the chosen option"""
    labels = labels or options
    click.echo(title)
    for i, label in enumerate(labels, 1):
        click.echo(f"  {i}) {label}")
    index = click.prompt(
        f"Enter your choice (1-{len(options)})",
        type=click.IntRange(1, len(options)),
    )
    return options[index - 1]


def collect_target(gcloud: GcloudClient, config: Dict[str, Any], logger: Logger) -> Target:
    """Prompt for domain, region, project and VM IP"""
    domain = prompt_domain()

    regions = config["regions"]
    region = choose(
        "Select the region closest to you for deploying cloud functions:",
        [r["name"] for r in regions],
        [f"{r['label']}: {r['name']}" for r in regions],
    )

    logger.info("Fetching Google Cloud project IDs...")
    project = choose(
        "Select the Google Cloud Project hosting your server:", gcloud.list_projects()
    )

    logger.info("Fetching Virtual Machine IPs...")
    vm_ip = choose(
        "Select the Virtual Machine IP to monitor:", gcloud.list_vm_ips(project)
    )

    slug = domain_slug(domain)
    return Target(
        domain=domain,
        region=region,
        project=project,
        vm_ip=vm_ip,
        slug=slug,
        names=artifact_names(slug),
    )
