"""Configuration management for uptimeguard"""

import copy
import os
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = Path.home() / ".uptimeguard" / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "regions": [
        {"name": "us-west1", "label": "Oregon"},
        {"name": "us-central1", "label": "Iowa"},
        {"name": "us-east1", "label": "South Carolina"},
    ],
    "deploy": {
        "max_wait": 240,
        "interval": 5,
        "schedule": "* * * * *",
        "service_account": "",
    },
    "functions": {
        "restart": {
            "entry_point": "restartVM",
            "runtime": "nodejs18",
            "template_dir": "v2_functions",
        },
        "ping": {
            "entry_point": "httpPing",
            "runtime": "nodejs20",
            "template_dir": "v1_functions",
        },
    },
    "paths": {
        "templates": ".",
        "output": ".",
    },
    "probe": {
        "enabled": True,
        "timeout": 10,
    },
    "logging": {
        "level": "info",
    },
}


class ConfigManager:
    """Manage uptimeguard configuration"""

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH):
        self.config_path = Path(config_path)

    def load(self) -> Dict[str, Any]:
        """Load configuration from defaults, file and environment"""
        config = copy.deepcopy(DEFAULTS)

        if self.config_path.exists():
            with open(self.config_path) as f:
                file_config = yaml.safe_load(f) or {}
            if not isinstance(file_config, dict):
                raise ValueError(f"Config file must contain a mapping: {self.config_path}")
            config = self._merge(config, file_config)

        config = self._apply_env_overrides(config)
        self._validate(config)
        return config

    def _validate(self, config: Dict[str, Any]) -> None:
        """Reject poll timings that are not positive numbers"""
        deploy = config.get("deploy")
        if not isinstance(deploy, dict):
            raise ValueError("deploy must be a mapping")
        for key in ("max_wait", "interval"):
            value = deploy.get(key)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(f"deploy.{key} must be a positive number, got {value!r}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Merge two configuration dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        if templates := os.getenv("UPTIMEGUARD_TEMPLATES_DIR"):
            config["paths"]["templates"] = templates

        if output := os.getenv("UPTIMEGUARD_OUTPUT_DIR"):
            config["paths"]["output"] = output

        if account := os.getenv("UPTIMEGUARD_SERVICE_ACCOUNT"):
            config["deploy"]["service_account"] = account

        if level := os.getenv("UPTIMEGUARD_LOG_LEVEL"):
            config["logging"]["level"] = level.lower()

        return config
