# request-signer
# Copyright (c) 2026 request-signer contributors
# SPDX-License-Identifier: MIT
"""
SigningProvider interface, HMAC-SHA256 implementation, request orchestration.

SignContent = Method + Path + SortedParams + Timestamp + Nonce (no delimiter)
Signature   = Hex(HMAC-SHA256(SignContent, AppSecret))
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from abc import ABC, abstractmethod

from request_signer.canonical import canonical_params
from request_signer.config import APP_ID_KEY, APP_SECRET_KEY
from request_signer.errors import ConfigurationError
from request_signer.models import (
    Credentials,
    RequestDescriptor,
    SignatureContext,
    SignatureResult,
)

logger = logging.getLogger(__name__)


class SigningProvider(ABC):
    """Turn a signing input into a signature string."""

    @abstractmethod
    def sign(self, signing_input: str) -> str:
        """Return signature string."""
        ...


class HmacSha256Signer(SigningProvider):
    """Lowercase hex HMAC-SHA256 keyed by the app secret (UTF-8)."""

    def __init__(self, secret: str) -> None:
        self._key = secret.encode("utf-8")

    def sign(self, signing_input: str) -> str:
        return hmac.new(
            self._key, signing_input.encode("utf-8"), hashlib.sha256
        ).hexdigest()


def build_signing_input(
    method: str, path: str, canonical: str, timestamp: str, nonce: str
) -> str:
    """Fixed order, no delimiter."""
    return method + path + canonical + timestamp + nonce


def check_credentials(credentials: Credentials) -> None:
    """Raise ConfigurationError if app_id or app_secret is missing/empty."""
    missing = []
    if not credentials.app_id:
        missing.append(APP_ID_KEY)
    if not credentials.app_secret:
        missing.append(APP_SECRET_KEY)
    if missing:
        logger.error("Configure %s before signing requests", " and ".join(missing))
        raise ConfigurationError(missing)


def sign_request(
    request: RequestDescriptor,
    credentials: Credentials,
    context: SignatureContext | None = None,
) -> SignatureResult:
    """
    Sign one request. Pure given (request, credentials, context).

    Args:
        request: method, path, optional raw body
        credentials: app id + secret; both must be non-empty
        context: fixed timestamp/nonce; a fresh one is generated when None

    Raises:
        ConfigurationError: app_id or app_secret missing/empty
    """
    check_credentials(credentials)
    method = request.method.upper()
    path = request.path
    params = canonical_params(request.body)
    ctx = context or SignatureContext.fresh()
    signing_input = build_signing_input(method, path, params, ctx.timestamp, ctx.nonce)
    signature = HmacSha256Signer(credentials.app_secret).sign(signing_input)

    logger.debug("Signature info:")
    logger.debug("  Method: %s", method)
    logger.debug("  Path: %s", path)
    logger.debug("  Timestamp: %s", ctx.timestamp)
    logger.debug("  Nonce: %s", ctx.nonce)
    logger.debug("  SortedParams: %s", params or "(empty)")
    logger.debug("  SignContent: %s", signing_input)
    logger.debug("  Signature: %s", signature)

    return SignatureResult(
        app_id=credentials.app_id,
        timestamp=ctx.timestamp,
        nonce=ctx.nonce,
        signature=signature,
        method=method,
        path=path,
        canonical_params=params,
        signing_input=signing_input,
    )
