"""Content fingerprint of review text, recomputed on every write."""

import hashlib


def fingerprint_for(text: str) -> str:
    """SHA-256 hex digest of the UTF-8 encoded text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
