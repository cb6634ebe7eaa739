"""Check that the external tools uptimeguard shells out to are installed."""

import shutil
from typing import Callable, Dict, List, Optional

from ..output import Logger

REQUIRED_TOOLS: Dict[str, str] = {
    "gcloud": "https://cloud.google.com/sdk/docs/install",
    "git": "https://github.com/git-guides/install-git",
    "curl": "https://curl.se/",
    "expect": "https://www.digitalocean.com/community/tutorials/expect-script-ssh-example-tutorial",
    "ssh-keygen": "https://docs.github.com/en/authentication/connecting-to-github-with-ssh/generating-a-new-ssh-key-and-adding-it-to-the-ssh-agent",
    "ssh-keyscan": "https://man.openbsd.org/ssh-keyscan.1",
}


def missing_prerequisites(which: Optional[Callable[[str], Optional[str]]] = None) -> List[str]:
    """Return the required tools that are not on PATH, in declaration order."""
    which = which or shutil.which
    return [name for name in REQUIRED_TOOLS if which(name) is None]


def check_prerequisites(
    logger: Logger, which: Optional[Callable[[str], Optional[str]]] = None
) -> bool:
    """Check prerequisites and report every missing tool with its install guide."""
    with logger.console.status("Checking prerequisites..."):
        missing = missing_prerequisites(which)

    if missing:
        for name in missing:
            logger.info(f"{name} is not installed. Learn more: {REQUIRED_TOOLS[name]}")
        logger.error("Exiting script due to missing prerequisites.")
        return False

    logger.debug("All prerequisites installed")
    return True
