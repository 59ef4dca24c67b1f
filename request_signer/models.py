# request-signer
# Copyright (c) 2026 request-signer contributors
# SPDX-License-Identifier: MIT
"""Request/credential/result types. All frozen; the secret never appears in repr."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from request_signer.nonce import current_timestamp, generate_nonce

HEADER_APP_ID = "X-App-Id"
HEADER_TIMESTAMP = "X-Timestamp"
HEADER_NONCE = "X-Nonce"
HEADER_SIGNATURE = "X-Signature"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"


def url_path(url: str) -> str:
    """Path component only (no scheme, host, query, fragment); "" -> "/"."""
    return urlsplit(url).path or "/"


@dataclass(frozen=True)
class RequestDescriptor:
    """Outgoing request as seen by the signer; body is raw text (JSON mode) or None."""

    method: str
    path: str
    body: str | bytes | None = None

    @classmethod
    def from_url(
        cls, method: str, url: str, body: str | bytes | None = None
    ) -> RequestDescriptor:
        return cls(method=method, path=url_path(url), body=body)


@dataclass(frozen=True)
class Credentials:
    app_id: str
    app_secret: str = field(repr=False)


@dataclass(frozen=True)
class SignatureContext:
    """Timestamp (Unix seconds, decimal) + nonce (UUID v4); fresh per call, never persisted."""

    timestamp: str
    nonce: str

    @classmethod
    def fresh(cls) -> SignatureContext:
        return cls(timestamp=current_timestamp(), nonce=generate_nonce())


@dataclass(frozen=True)
class SignatureResult:
    """
    Output of one signing call.

    method/path/canonical_params/signing_input are kept for diagnostics only;
    the header contract is app_id, timestamp, nonce, signature.
    """

    app_id: str
    timestamp: str
    nonce: str
    signature: str
    method: str = ""
    path: str = ""
    canonical_params: str = ""
    signing_input: str = ""

    def as_headers(self) -> dict[str, str]:
        """Headers to upsert on the outgoing request (Content-Type forced to JSON)."""
        return {
            HEADER_APP_ID: self.app_id,
            HEADER_TIMESTAMP: self.timestamp,
            HEADER_NONCE: self.nonce,
            HEADER_SIGNATURE: self.signature,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
        }
