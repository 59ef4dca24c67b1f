# request-signer
# Copyright (c) 2026 request-signer contributors
# SPDX-License-Identifier: MIT
"""Pre-request hook for requests: sign a PreparedRequest and upsert the signature headers."""

from __future__ import annotations

import requests
from requests.auth import AuthBase

from request_signer.config import SecretsProvider, load_credentials
from request_signer.headers import apply_signature
from request_signer.models import (
    Credentials,
    RequestDescriptor,
    SignatureContext,
    SignatureResult,
)
from request_signer.signing import check_credentials, sign_request


def sign_prepared_request(
    prepared: requests.PreparedRequest,
    credentials: Credentials,
    context: SignatureContext | None = None,
) -> SignatureResult:
    """Sign prepared in place (headers upserted); return the result for inspection."""
    body = prepared.body
    if not isinstance(body, (str, bytes)):
        # streamed/file bodies are not JSON mode; signed without params
        body = None
    request = RequestDescriptor.from_url(prepared.method or "GET", prepared.url or "", body)
    result = sign_request(request, credentials, context)
    apply_signature(prepared.headers, result)
    return result


class HmacSignatureAuth(AuthBase):
    """
    requests auth hook: session.auth = HmacSignatureAuth().

    Credentials resolve at construction (env APP_ID / APP_SECRET by default), so a
    missing value fails before any request is built.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        provider: SecretsProvider | None = None,
    ) -> None:
        if credentials is None:
            credentials = load_credentials(provider)
        else:
            check_credentials(credentials)
        self.credentials = credentials

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        sign_prepared_request(r, self.credentials)
        return r
