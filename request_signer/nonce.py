"""Per-call signature context: Unix-seconds timestamp and UUID v4 nonce."""

import re
import time
import uuid

# Lowercase 8-4-4-4-12; version nibble 4, variant nibble in {8,9,a,b}.
NONCE_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def generate_nonce() -> str:
    """Random UUID v4 (os.urandom-backed); uniqueness is probabilistic."""
    return str(uuid.uuid4())


def current_timestamp() -> str:
    """Current Unix time in whole seconds, as a decimal string."""
    return str(int(time.time()))
