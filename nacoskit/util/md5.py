"""MD5 digests of text."""

from __future__ import annotations

import hashlib


def md5(content: str) -> str:
    """Return the lower-case hex MD5 digest of the UTF-8 encoded text."""
    return hashlib.md5(content.encode("utf-8")).hexdigest()