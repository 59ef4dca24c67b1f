# request-signer
# Copyright (c) 2026 request-signer contributors
# SPDX-License-Identifier: MIT
"""Credentials from APP_ID / APP_SECRET via a secrets provider (env or host mapping)."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Mapping

from request_signer.errors import ConfigurationError
from request_signer.models import Credentials

logger = logging.getLogger(__name__)

APP_ID_KEY = "APP_ID"
APP_SECRET_KEY = "APP_SECRET"


class SecretsProvider(ABC):
    """Abstract provider for configuration values; never log what it returns."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return value for key or None if not set."""
        ...


class EnvSecretsProvider(SecretsProvider):
    """Read from environment variables (e.g. APP_ID -> os.environ['APP_ID'])."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def get(self, key: str) -> str | None:
        env_key = f"{self.prefix}{key}".replace(".", "_").upper()
        return os.environ.get(env_key)


class MappingSecretsProvider(SecretsProvider):
    """Read from a host tool's environment object (any str -> str mapping)."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = values

    def get(self, key: str) -> str | None:
        return self._values.get(key)


def load_credentials(provider: SecretsProvider | None = None) -> Credentials:
    """
    Resolve APP_ID and APP_SECRET.

    Raises:
        ConfigurationError: either value missing or empty
    """
    provider = provider or EnvSecretsProvider()
    app_id = provider.get(APP_ID_KEY) or ""
    app_secret = provider.get(APP_SECRET_KEY) or ""
    missing = [
        key for key, value in ((APP_ID_KEY, app_id), (APP_SECRET_KEY, app_secret))
        if not value
    ]
    if missing:
        logger.error("Configure %s in environment variables", " and ".join(missing))
        raise ConfigurationError(missing)
    credentials = Credentials(app_id=app_id, app_secret=app_secret)
    # repr omits app_secret
    logger.debug("Loaded credentials: %r", credentials)
    return credentials
