"""Domain validation and artifact naming"""

import re
from typing import NamedTuple

DOMAIN_PATTERN = re.compile(r"^https?://\S+$")

_SCHEME = re.compile(r"^[a-z]+://")
_WWW = re.compile(r"^www\.")
_INVALID = re.compile(r"[^a-z0-9-]+")


class ArtifactNames(NamedTuple):
    """Names of everything deployed for one domain"""

    restart_function: str
    ping_function: str
    scheduler_job: str


def is_valid_domain(text: str) -> bool:
    """Check that the input is an http or https URL with a host to name things after"""
    text = text or ""
    return bool(DOMAIN_PATTERN.match(text)) and bool(domain_slug(text))


def domain_slug(domain: str) -> str:
    """Normalize a domain URL into a name usable by Cloud Functions.

    ``https://www.Example.com/`` becomes ``example-com``. Applying it to its
    own output returns the same value.
    """
    slug = domain.strip().lower()
    slug = _SCHEME.sub("", slug)
    slug = _WWW.sub("", slug)
    slug = _INVALID.sub("-", slug)
    return slug.strip("-")


def artifact_names(slug: str) -> ArtifactNames:
    return ArtifactNames(
        restart_function=f"restartvmservice-{slug}",
        ping_function=f"httpping-{slug}",
        scheduler_job=f"httppinger-{slug}",
    )
