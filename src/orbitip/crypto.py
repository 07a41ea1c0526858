"""Cryptographic operations: reboot challenge-response and reader secrets."""

import os

from cryptography.hazmat.primitives import hashes

# The reader's MD5 field holds 8 secret bytes as 16 hex characters
SECRET_LENGTH = 8


def reboot_digest(nonce: bytes, key: bytes) -> str:
    """Answer a reboot challenge: lowercase hex MD5 over nonce followed by key."""
    # S303: MD5 is fixed by the reader firmware
    digest = hashes.Hash(hashes.MD5())  # noqa: S303  # nosec B303
    digest.update(nonce)
    digest.update(key)
    return digest.finalize().hex()


def generate_secret() -> str:
    """Generate a random shared secret for the reader's MD5 field."""
    return os.urandom(SECRET_LENGTH).hex()
