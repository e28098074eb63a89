"""
Request body signatures.

A signature is the lowercase SHA-1 hex digest of the raw request body, passed
by the caller as the ``signature`` query parameter. It is a plain digest and
not a keyed MAC, so it only detects corrupted bodies; anyone holding the body
can produce a matching signature.
"""

import hashlib
from typing import Optional, Union


def compute_signature(raw_body: Union[bytes, str]) -> str:
    """Return the SHA-1 hex digest of ``raw_body``."""
    if isinstance(raw_body, str):
        raw_body = raw_body.encode("utf-8")
    return hashlib.sha1(raw_body).hexdigest()


def is_valid_signature(raw_body: Union[bytes, str], supplied_signature: Optional[str], required: bool) -> bool:
    """Check ``supplied_signature`` against the body.

    An empty signature counts as absent. When absent, the check passes only if
    a signature is not ``required``. Comparison is exact and case-sensitive.
    """
    if supplied_signature:
        return compute_signature(raw_body) == supplied_signature
    return not required
