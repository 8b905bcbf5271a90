"""Hashing helpers used by the address and key codecs."""

from __future__ import annotations

import hashlib


def sha256(data: bytes) -> bytes:
    """Single SHA-256 hash."""
    return hashlib.sha256(data).digest()


def sha256d(data: bytes) -> bytes:
    """Double SHA-256, used for Base58Check checksums."""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD-160(SHA-256(data)), the hash committed to by P2PKH and P2WPKH."""
    h = hashlib.new("ripemd160")
    h.update(sha256(data))
    return h.digest()
