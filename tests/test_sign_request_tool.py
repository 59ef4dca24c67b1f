"""tools/sign_request.py: prints the five headers; exit 2 on missing configuration."""

import importlib.util
import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
VECTOR_SIGNATURE = "03c9dd850a3ec68d0fbbc82a9c75e1fb3124d5ba3188229cb4cd82b9067e63a1"


@pytest.fixture
def tool():
    path = ROOT / "tools" / "sign_request.py"
    spec = importlib.util.spec_from_file_location("sign_request_tool", path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.fixture
def creds_env(monkeypatch):
    monkeypatch.setenv("APP_ID", "app-123")
    monkeypatch.setenv("APP_SECRET", "s3cr3t")


VECTOR_ARGS = [
    "post",
    "https://api.example.com/api/v1/messages?x=1",
    "--timestamp", "1700000000",
    "--nonce", "11111111-1111-4111-8111-111111111111",
]


def test_prints_headers_for_vector(tool, creds_env, capsys) -> None:
    assert tool.main(VECTOR_ARGS + ["--body", '{"b":2,"a":1}']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "X-App-Id: app-123",
        "X-Timestamp: 1700000000",
        "X-Nonce: 11111111-1111-4111-8111-111111111111",
        f"X-Signature: {VECTOR_SIGNATURE}",
        "Content-Type: application/json",
    ]


def test_body_from_file(tool, creds_env, capsys, tmp_path) -> None:
    body = tmp_path / "body.json"
    body.write_text('{"a": 1, "b": 2}', encoding="utf-8")
    assert tool.main(VECTOR_ARGS + ["--body-file", str(body)]) == 0
    assert f"X-Signature: {VECTOR_SIGNATURE}" in capsys.readouterr().out


def test_body_from_stdin(tool, creds_env, capsys, monkeypatch) -> None:
    fake_stdin = io.TextIOWrapper(io.BytesIO(b'{"b":2,"a":1}'), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", fake_stdin)
    assert tool.main(VECTOR_ARGS + ["--body-file", "-"]) == 0
    assert f"X-Signature: {VECTOR_SIGNATURE}" in capsys.readouterr().out


def test_missing_config_exits_2(tool, monkeypatch, capsys) -> None:
    monkeypatch.delenv("APP_ID", raising=False)
    monkeypatch.setenv("APP_SECRET", "s3cr3t")
    assert tool.main(["GET", "/health"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "APP_ID" in captured.err
