"""Shared secret generation"""

import base64
import secrets


def generate_password(nbytes: int = 12) -> str:
    """Generate a random base64 password (same shape as ``openssl rand -base64 12``)"""
    return base64.b64encode(secrets.token_bytes(nbytes)).decode("utf-8")


def mask(secret: str) -> str:
    """Hide all but the first two characters"""
    return secret[:2] + "*" * max(len(secret) - 2, 0)
