# request-signer
# Copyright (c) 2026 request-signer contributors
# SPDX-License-Identifier: MIT
"""
Canonical request parameters: recursive key sort + compact JSON.

Text follows JSON.stringify: no whitespace, non-ASCII left unescaped, lone
surrogates escaped as \\udXXX, numbers in ECMAScript Number-to-string form
(1.0 -> 1, 1e-07 -> 1e-7, 1e-05 -> 0.00001). Integers keep full precision.

Invalid, empty or too deeply nested bodies yield "" (signature is still
computed, without a body contribution). Never raises.
"""

from __future__ import annotations

import json
import logging
import re
from decimal import Decimal
from typing import Any

logger = logging.getLogger(__name__)

_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def canonicalize(obj: Any) -> Any:
    """Recursive: sort object keys at every depth; lists keep order; scalars unchanged."""
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj)}
    if isinstance(obj, list):
        return [canonicalize(x) for x in obj]
    return obj


def _js_number(x: float) -> str:
    """ECMAScript Number::toString on the shortest round-trip digits of x."""
    if x != x or x in (float("inf"), float("-inf")):
        raise ValueError("Out of range float values are not JSON compliant")
    if x == 0:
        return "0"
    sign = "-" if x < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exp + k  # decimal point position relative to the first digit
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        text = "%se%s%d" % (mantissa, "+" if e > 0 else "-", abs(e))
    return sign + text


def _js_string(s: str) -> str:
    text = json.dumps(s, ensure_ascii=False)
    return _LONE_SURROGATE.sub(lambda m: "\\u%04x" % ord(m.group()), text)


def _dump(obj: Any) -> str:
    if obj is None:
        return "null"
    if obj is True:
        return "true"
    if obj is False:
        return "false"
    if isinstance(obj, str):
        return _js_string(obj)
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, float):
        return _js_number(obj)
    if isinstance(obj, dict):
        return "{" + ",".join(_js_string(k) + ":" + _dump(v) for k, v in obj.items()) + "}"
    if isinstance(obj, list):
        return "[" + ",".join(_dump(x) for x in obj) + "]"
    raise TypeError("Object of type %s is not JSON serializable" % type(obj).__name__)


def dump_canonical(obj: Any) -> str:
    """Compact JSON text of canonicalize(obj)."""
    return _dump(canonicalize(obj))


def _reject_constant(name: str) -> Any:
    raise ValueError("non-standard JSON constant: %s" % name)


def canonical_params(body: str | bytes | None) -> str:
    """
    Canonical parameter string for a raw request body.

    Returns "" for absent, empty, whitespace-only, non-UTF-8, non-JSON or
    too deeply nested bodies.
    """
    if body is None:
        return ""
    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Request body is not valid UTF-8; skipping parameter sort")
            return ""
    if not body.strip():
        return ""
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.warning("Request body is not valid JSON; skipping parameter sort")
        return ""
    try:
        return dump_canonical(data)
    except RecursionError:
        logger.warning("Request body is nested too deeply; skipping parameter sort")
        return ""
