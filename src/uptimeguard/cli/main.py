#!/usr/bin/env python3
"""uptimeguard CLI - Main entry point"""

import sys
from pathlib import Path

import click
import yaml
from rich.table import Table

from uptimeguard import __version__
from uptimeguard.cli.prompts import collect_target, confirm_start
from uptimeguard.config import DEFAULT_CONFIG_PATH, ConfigManager
from uptimeguard.credentials import generate_password, mask
from uptimeguard.deploy import Deployer
from uptimeguard.errors import UptimeGuardError
from uptimeguard.gcloud import GcloudClient
from uptimeguard.installer import check_prerequisites
from uptimeguard.output import Logger
from uptimeguard.probe import probe_domain


@click.command()
@click.argument("mode", required=False, type=click.Choice(["debug"]))
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--config", type=click.Path(dir_okay=False), help="Config file path")
@click.option("--templates-dir", type=click.Path(file_okay=False), help="Directory holding v1_functions/ and v2_functions/")
@click.option("--output-dir", type=click.Path(file_okay=False), help="Where the deployment directory is created")
@click.version_option(__version__, prog_name="uptimeguard")
def cli(mode, verbose, config, templates_dir, output_dir):
    """Deploy Cloud Functions that ping your server and restart its VM when it stops answering.

    Pass `debug` to print every step and gcloud command.
    """
    config_path = Path(config) if config else DEFAULT_CONFIG_PATH
    try:
        cfg = ConfigManager(config_path).load()
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Could not load config {config_path}: {e}")

    if templates_dir:
        cfg["paths"]["templates"] = templates_dir
    if output_dir:
        cfg["paths"]["output"] = output_dir

    logger = Logger(level=cfg["logging"].get("level", "info"))
    if mode == "debug" or verbose:
        logger.enable_debug()

    if not check_prerequisites(logger):
        sys.exit(1)

    if not confirm_start():
        logger.info("Exiting script.")
        return

    gcloud = GcloudClient(logger=logger)
    try:
        target = collect_target(gcloud, cfg, logger)

        password = generate_password()
        logger.debug(f"Generated secure password: {mask(password)}")

        if cfg["probe"].get("enabled", True):
            check_target(target.domain, cfg["probe"].get("timeout", 10), logger)

        result = Deployer(gcloud, cfg, logger).run(target, password)
    except UptimeGuardError as e:
        logger.error(str(e))
        sys.exit(1)

    table = Table(title=f"Monitoring for {target.domain}")
    table.add_column("Resource", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("URL")
    table.add_row("Restart function", target.names.restart_function, result.restart_url)
    table.add_row("Ping function", target.names.ping_function, result.ping_url)
    table.add_row("Scheduler job", result.scheduler_job, cfg["deploy"]["schedule"])
    logger.console.print(table)
    logger.success(f"Deployment files written to {result.deploy_dir}")


def check_target(domain: str, timeout: float, logger: Logger):
    """Warn when the domain does not answer before monitoring is set up"""
    result = probe_domain(domain, timeout=timeout)
    if result.ok:
        logger.debug(f"{domain} answered with HTTP {result.status_code}")
    elif result.status_code is not None:
        logger.warning(f"{domain} answered with HTTP {result.status_code}; the VM will be restarted while this persists")
    else:
        logger.warning(f"{domain} is not reachable right now: {result.error}")


if __name__ == "__main__":
    cli()
