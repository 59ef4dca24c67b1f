#!/usr/bin/env python
"""
Print signature headers for a request (same headers HmacSignatureAuth injects).
Credentials: APP_ID / APP_SECRET environment variables.
Usage:
  python tools/sign_request.py POST /api/v1/messages --body '{"b":2,"a":1}'
  python tools/sign_request.py POST https://host/api/v1/messages --body-file - < body.json
"""
import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from request_signer import __version__
from request_signer.config import load_credentials
from request_signer.errors import ConfigurationError
from request_signer.models import RequestDescriptor, SignatureContext
from request_signer.nonce import current_timestamp, generate_nonce
from request_signer.signing import sign_request


def _read_body(args: argparse.Namespace):
    if args.body_file is None:
        return args.body
    if args.body_file == "-":
        return sys.stdin.buffer.read()
    return Path(args.body_file).read_bytes()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Compute X-Signature headers for a request")
    ap.add_argument("method", help="HTTP method (upper-cased)")
    ap.add_argument("url", help="Full URL or path; only the path is signed")
    body = ap.add_mutually_exclusive_group()
    body.add_argument("--body", type=str, default=None, help="Raw JSON body")
    body.add_argument("--body-file", type=str, default=None, help="Body file path ('-' = stdin)")
    ap.add_argument("--timestamp", type=str, default=None, help="Fixed Unix seconds (reproduce a signature)")
    ap.add_argument("--nonce", type=str, default=None, help="Fixed nonce (reproduce a signature)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Diagnostic log on stderr")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        credentials = load_credentials()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    context = SignatureContext(
        timestamp=args.timestamp or current_timestamp(),
        nonce=args.nonce or generate_nonce(),
    )
    request = RequestDescriptor.from_url(args.method, args.url, _read_body(args))
    result = sign_request(request, credentials, context)
    for name, value in result.as_headers().items():
        print(f"{name}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
