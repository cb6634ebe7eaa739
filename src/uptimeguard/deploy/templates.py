"""Copy function templates into a deployment directory and fill in placeholders"""

import shutil
from pathlib import Path
from typing import Dict

from ..errors import TemplateError

ARTIFACT_FILES = ("index.js", "package.json")
SOURCE_FILE = "index.js"

PING_DIR = "v1_functions"
RESTART_DIR = "v2_functions"


def prepare_deploy_dir(output_root: Path, slug: str) -> Path:
    """Create ``<output_root>/<slug>`` with one subdirectory per artifact"""
    deploy_dir = Path(output_root) / slug
    (deploy_dir / PING_DIR).mkdir(parents=True, exist_ok=True)
    (deploy_dir / RESTART_DIR).mkdir(parents=True, exist_ok=True)
    return deploy_dir


def substitute(text: str, substitutions: Dict[str, str]) -> str:
    for placeholder, value in substitutions.items():
        text = text.replace(placeholder, value)
    return text


def stage_artifact(template_dir: Path, dest_dir: Path, substitutions: Dict[str, str]) -> Path:
    """Copy an artifact's files and substitute placeholders in its source"""
    template_dir = Path(template_dir)
    dest_dir = Path(dest_dir)

    if dest_dir.resolve() == template_dir.resolve():
        raise TemplateError(f"Refusing to stage {template_dir} onto itself")

    for filename in ARTIFACT_FILES:
        if not (template_dir / filename).is_file():
            raise TemplateError(f"Template file not found: {template_dir / filename}")

    dest_dir.mkdir(parents=True, exist_ok=True)
    for filename in ARTIFACT_FILES:
        shutil.copyfile(template_dir / filename, dest_dir / filename)

    source = dest_dir / SOURCE_FILE
    source.write_text(substitute(source.read_text(encoding="utf-8"), substitutions), encoding="utf-8")
    return dest_dir
