"""Base58Check encoding and the public key type used by descriptor leaves.

Provides:
- Base58 / Base58Check encoding and decoding (legacy addresses)
- ``PublicKey``: a SEC-encoded secp256k1 point, validated on construction
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from ecdsa import SECP256k1, VerifyingKey
from ecdsa.errors import MalformedPointError

from btc_descriptors.utils.crypto import hash160, sha256d

# ---------------------------------------------------------------------------
# Base58Check encoding / decoding
# ---------------------------------------------------------------------------

_B58_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def base58_encode(payload: bytes) -> str:
    """Encode raw bytes to Base58 (no checksum)."""
    n = int.from_bytes(payload, "big")
    result: list[int] = []
    while n > 0:
        n, remainder = divmod(n, 58)
        result.append(_B58_ALPHABET[remainder])
    # Leading zero bytes map to '1'
    for byte in payload:
        if byte != 0:
            break
        result.append(_B58_ALPHABET[0])
    return bytes(reversed(result)).decode("ascii")


def base58_decode(s: str) -> bytes:
    """Decode a Base58 string to raw bytes (no checksum).

    Raises:
        ValueError: If *s* contains a character outside the Base58 alphabet.
    """
    n = 0
    for char in s:
        digit = _B58_ALPHABET.find(char.encode("ascii", errors="replace"))
        if digit == -1:
            msg = f"Invalid Base58 character: {char!r}"
            raise ValueError(msg)
        n = n * 58 + digit
    result = n.to_bytes((n.bit_length() + 7) // 8, "big") if n > 0 else b""
    pad_count = len(s) - len(s.lstrip("1"))
    return b"\x00" * pad_count + result


def base58check_encode(payload: bytes) -> str:
    """Encode bytes with a 4-byte SHA256d checksum (Base58Check)."""
    return base58_encode(payload + sha256d(payload)[:4])


def base58check_decode(s: str) -> bytes:
    """Decode a Base58Check string, verifying the checksum.

    Raises:
        ValueError: If the string is malformed or the checksum is invalid.
    """
    raw = base58_decode(s)
    if len(raw) < 4:
        msg = "Base58Check string too short"
        raise ValueError(msg)
    payload, checksum = raw[:-4], raw[-4:]
    if checksum != sha256d(payload)[:4]:
        msg = "Base58Check checksum mismatch"
        raise ValueError(msg)
    return payload


# ---------------------------------------------------------------------------
# Public keys
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class PublicKey:
    """A compressed (33-byte) or uncompressed (65-byte) secp256k1 public key.

    The encoding is checked to be a point on the curve when the key is built,
    so a ``PublicKey`` that exists is always usable in a script.
    """

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) not in (33, 65):
            msg = f"Invalid public key length: {len(self.data)}"
            raise ValueError(msg)
        try:
            VerifyingKey.from_string(self.data, curve=SECP256k1)
        except MalformedPointError as exc:
            msg = f"Invalid public key: {exc}"
            raise ValueError(msg) from exc

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Parse a hex-encoded SEC public key."""
        return cls(bytes.fromhex(value))

    @property
    def compressed(self) -> bool:
        return len(self.data) == 33

    def to_pubkeyhash(self) -> bytes:
        """The 20-byte hash160 this key is committed to in P2PKH/P2WPKH."""
        return hash160(self.data)

    def __str__(self) -> str:
        return self.data.hex()
