"""Header upsert on the outgoing request (create if absent, replace if present)."""

from __future__ import annotations

from typing import MutableMapping

from request_signer.models import SignatureResult


def upsert_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Set name=value; entries whose name matches case-insensitively are replaced, not duplicated."""
    lowered = name.lower()
    for existing in [k for k in headers if k.lower() == lowered and k != name]:
        del headers[existing]
    headers[name] = value


def apply_signature(headers: MutableMapping[str, str], result: SignatureResult) -> None:
    for name, value in result.as_headers().items():
        upsert_header(headers, name, value)
