#!/usr/bin/env python3
"""
Compute request signatures for the strings service.

The service expects ``?signature=`` to be the SHA-1 hex digest of the exact
bytes posted. This helper prints that digest for a body given inline or read
from a file, and can print a ready-to-run curl command.
"""

import argparse
import shlex
import sys
import os
from pathlib import Path
from typing import List, Optional

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from service_strings.app.domain.signature import compute_signature  # noqa: E402


def build_curl(base_url: str, endpoint: str, body: bytes, user: str) -> str:
    """Return a curl command posting ``body`` with its signature."""
    url = f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}?signature={compute_signature(body)}"
    return " ".join([
        "curl", "-X", "POST",
        "-u", shlex.quote(user),
        shlex.quote(url),
        "-d", shlex.quote(body.decode("utf-8")),
    ])


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sign request bodies for the strings service.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--body", help="Request body, exactly as it will be sent")
    source.add_argument("--body-file", type=Path, help="Path to a file holding the request body")
    parser.add_argument("--curl", choices=["split", "join"], default=None, help="Print a curl command for this endpoint")
    parser.add_argument("--base-url", default=os.getenv("STRINGS_BASE_URL", "http://localhost:8000"), help="Strings service URL")
    parser.add_argument("--user", default="USER:PASS", help="Basic auth credentials for the curl command")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.body_file is not None:
        try:
            body = args.body_file.read_bytes()
        except OSError as exc:
            print(f"[sign] cannot read body: {exc}", file=sys.stderr)
            return 1
    else:
        body = args.body.encode("utf-8")

    if args.curl:
        print(build_curl(args.base_url, args.curl, body, args.user))
    else:
        print(compute_signature(body))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
