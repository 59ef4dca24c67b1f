# request-signer
# Copyright (c) 2026 request-signer contributors
# SPDX-License-Identifier: MIT
"""HMAC-SHA256 request signing: canonical params, nonce, headers."""

from request_signer.auth import HmacSignatureAuth, sign_prepared_request
from request_signer.canonical import canonical_params, canonicalize, dump_canonical
from request_signer.config import (
    EnvSecretsProvider,
    MappingSecretsProvider,
    SecretsProvider,
    load_credentials,
)
from request_signer.errors import ConfigurationError
from request_signer.headers import apply_signature, upsert_header
from request_signer.nonce import current_timestamp, generate_nonce
from request_signer.signing import (
    HmacSha256Signer,
    SigningProvider,
    build_signing_input,
    sign_request,
)
from request_signer.models import (
    Credentials,
    RequestDescriptor,
    SignatureContext,
    SignatureResult,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigurationError",
    "Credentials",
    "EnvSecretsProvider",
    "HmacSha256Signer",
    "HmacSignatureAuth",
    "MappingSecretsProvider",
    "RequestDescriptor",
    "SecretsProvider",
    "SignatureContext",
    "SignatureResult",
    "SigningProvider",
    "apply_signature",
    "build_signing_input",
    "canonical_params",
    "canonicalize",
    "current_timestamp",
    "dump_canonical",
    "generate_nonce",
    "load_credentials",
    "sign_prepared_request",
    "sign_request",
    "upsert_header",
]
