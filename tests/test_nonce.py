"""Nonce is UUID v4 shaped; timestamp is decimal Unix seconds."""

import time

from request_signer.nonce import NONCE_PATTERN, current_timestamp, generate_nonce


def test_nonce_v4_shape() -> None:
    for _ in range(200):
        assert NONCE_PATTERN.match(generate_nonce())


def test_nonces_differ() -> None:
    assert len({generate_nonce() for _ in range(100)}) == 100


def test_pattern_rejects_wrong_version_and_variant() -> None:
    assert not NONCE_PATTERN.match("11111111-1111-1111-8111-111111111111")
    assert not NONCE_PATTERN.match("11111111-1111-4111-c111-111111111111")
    assert NONCE_PATTERN.match("11111111-1111-4111-8111-111111111111")


def test_timestamp_is_whole_seconds() -> None:
    before = int(time.time())
    ts = current_timestamp()
    after = int(time.time())
    assert ts.isdigit()
    assert before <= int(ts) <= after
