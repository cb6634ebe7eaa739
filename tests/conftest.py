"""Shared fixtures: a fake gcloud runner and artifact templates"""

import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from uptimeguard.config.manager import ConfigManager
from uptimeguard.output import Logger

RESTART_TEMPLATE = """const projectId = 'YOUR_PROJECT_ID';
const staticIp = 'YOUR_STATIC_IP';
exports.restartVM = async (req, res) => { res.send(projectId + staticIp); };
"""

PING_TEMPLATE = """const target = 'YOURDOMAIN.COM';
const webhook = 'YOUR_WEBHOOK_URL2';
const password = 'YOUR_UNIQUE_PASSWORD';
exports.httpPing = async (req, res) => { res.send(target); };
"""

PACKAGE_JSON = '{"name": "fn", "version": "1.0.0"}\n'


class FakeGcloud:
    """Stand-in for run_command that answers gcloud invocations"""

    def __init__(self, projects=("demo-project",), ips=("34.1.2.3",), statuses=None):
        self.projects = list(projects)
        self.ips = list(ips)
        self.statuses = statuses
        self.calls = []

    def __call__(self, cmd, cwd=None, check=True):
        self.calls.append(cmd)
        joined = " ".join(cmd)
        stdout = ""

        if "projects list" in joined:
            stdout = "\n".join(self.projects)
        elif "instances list" in joined:
            stdout = "\n".join(self.ips)
        elif "value(status)" in joined:
            if self.statuses is None:
                stdout = "ACTIVE"
            elif self.statuses:
                stdout = self.statuses.pop(0)
            else:
                stdout = "DEPLOY_IN_PROGRESS"
        elif "value(httpsTrigger.url)" in joined:
            name = cmd[3]
            stdout = f"https://us-west1-demo-project.cloudfunctions.net/{name}"

        return subprocess.CompletedProcess(cmd, 0, stdout=stdout + "\n", stderr="")

    def commands(self, *words):
        """Calls whose arguments contain all the given words"""
        return [c for c in self.calls if all(w in c for w in words)]


@pytest.fixture
def fake_gcloud():
    return FakeGcloud()


@pytest.fixture
def logger():
    return Logger(console=Console(record=True, width=200, force_terminal=False), level="debug")


@pytest.fixture
def templates_dir(tmp_path) -> Path:
    root = tmp_path / "templates"
    for name, source in (("v2_functions", RESTART_TEMPLATE), ("v1_functions", PING_TEMPLATE)):
        (root / name).mkdir(parents=True)
        (root / name / "index.js").write_text(source)
        (root / name / "package.json").write_text(PACKAGE_JSON)
    return root


@pytest.fixture
def config(tmp_path, templates_dir, monkeypatch):
    for var in (
        "UPTIMEGUARD_TEMPLATES_DIR",
        "UPTIMEGUARD_OUTPUT_DIR",
        "UPTIMEGUARD_SERVICE_ACCOUNT",
        "UPTIMEGUARD_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    cfg = ConfigManager(tmp_path / "missing.yaml").load()
    cfg["paths"]["templates"] = str(templates_dir)
    cfg["paths"]["output"] = str(tmp_path / "out")
    return cfg
