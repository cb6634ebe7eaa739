"""Reachability probe for the monitored domain"""

from typing import NamedTuple, Optional

import httpx


class ProbeResult(NamedTuple):
    ok: bool
    status_code: Optional[int] = None
    error: str = ""


def probe_domain(url: str, timeout: float = 10.0, client: Optional[httpx.Client] = None) -> ProbeResult:
    """GET the domain once and report whether it answered without a server error"""
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as http:
                response = http.get(url)
    except httpx.HTTPError as e:
        return ProbeResult(ok=False, error=str(e) or e.__class__.__name__)

    return ProbeResult(ok=response.status_code < 500, status_code=response.status_code)
