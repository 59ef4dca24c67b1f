# request-signer
# Copyright (c) 2026 request-signer contributors
# SPDX-License-Identifier: MIT
"""Errors. ConfigurationError is the only fatal condition."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """APP_ID or APP_SECRET missing/empty; aborts the request before any header is set."""

    def __init__(self, missing: tuple[str, ...] | list[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            "Missing %s in environment variables" % " or ".join(self.missing)
        )
