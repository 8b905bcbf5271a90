"""Bech32 / Bech32m encoding and segwit address helpers (BIP173, BIP350).

Segwit v0 outputs use the original Bech32 checksum; v1 and later (taproot)
use Bech32m. Decoding reports which of the two checksums matched so the
caller can enforce that pairing.
"""

from __future__ import annotations

import enum

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_BECH32M_CONST = 0x2BC830A3
_MAX_LENGTH = 90


class Encoding(enum.Enum):
    """Checksum constant used by a Bech32 string."""

    BECH32 = 1
    BECH32M = _BECH32M_CONST


def _polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i in range(5):
            chk ^= _GENERATOR[i] if ((top >> i) & 1) else 0
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def _create_checksum(hrp: str, data: list[int], encoding: Encoding) -> list[int]:
    values = _hrp_expand(hrp) + data
    polymod = _polymod(values + [0, 0, 0, 0, 0, 0]) ^ encoding.value
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]


def bech32_encode(hrp: str, data: list[int], encoding: Encoding) -> str:
    """Encode a human-readable part and 5-bit data words."""
    combined = data + _create_checksum(hrp, data, encoding)
    return hrp + "1" + "".join(CHARSET[d] for d in combined)


def bech32_decode(text: str) -> tuple[str, list[int], Encoding]:
    """Decode a Bech32 or Bech32m string.

    Returns:
        Tuple of (hrp, data words without checksum, encoding).

    Raises:
        ValueError: On invalid characters, mixed case, bad length or checksum.
    """
    if any(ord(x) < 33 or ord(x) > 126 for x in text):
        msg = "Bech32 string contains invalid characters"
        raise ValueError(msg)
    if text.lower() != text and text.upper() != text:
        msg = "Bech32 string uses mixed case"
        raise ValueError(msg)
    text = text.lower()
    pos = text.rfind("1")
    if pos < 1 or pos + 7 > len(text) or len(text) > _MAX_LENGTH:
        msg = "Bech32 string has invalid separator position or length"
        raise ValueError(msg)
    hrp = text[:pos]
    data = [CHARSET.find(c) for c in text[pos + 1 :]]
    if -1 in data:
        msg = "Bech32 data part contains invalid characters"
        raise ValueError(msg)
    const = _polymod(_hrp_expand(hrp) + data)
    for encoding in Encoding:
        if const == encoding.value:
            return hrp, data[:-6], encoding
    msg = "Bech32 checksum mismatch"
    raise ValueError(msg)


def convert_bits(data: list[int] | bytes, from_bits: int, to_bits: int, *, pad: bool = True) -> list[int]:
    """Regroup a sequence of *from_bits*-wide integers into *to_bits*-wide ones.

    Raises:
        ValueError: If a value is out of range or the padding is non-zero.
    """
    acc = 0
    bits = 0
    ret: list[int] = []
    maxv = (1 << to_bits) - 1
    for value in data:
        if value < 0 or (value >> from_bits):
            msg = f"Value {value} does not fit in {from_bits} bits"
            raise ValueError(msg)
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        msg = "Invalid padding in bit conversion"
        raise ValueError(msg)
    return ret


def decode_segwit_address(hrp: str, address: str) -> tuple[int, bytes]:
    """Decode a segwit address for the given human-readable part.

    Returns:
        Tuple of (witness version, witness program).

    Raises:
        ValueError: If the address is not a valid segwit address for *hrp*.
    """
    found_hrp, data, encoding = bech32_decode(address)
    if found_hrp != hrp:
        msg = f"Unexpected human-readable part: {found_hrp!r}"
        raise ValueError(msg)
    if not data:
        msg = "Empty segwit data part"
        raise ValueError(msg)
    version = data[0]
    if version > 16:
        msg = f"Invalid witness version: {version}"
        raise ValueError(msg)
    program = bytes(convert_bits(data[1:], 5, 8, pad=False))
    if not 2 <= len(program) <= 40:
        msg = f"Invalid witness program length: {len(program)}"
        raise ValueError(msg)
    if version == 0 and len(program) not in (20, 32):
        msg = f"Invalid segwit v0 program length: {len(program)}"
        raise ValueError(msg)
    expected = Encoding.BECH32 if version == 0 else Encoding.BECH32M
    if encoding != expected:
        msg = f"Witness version {version} must use {expected.name.lower()}"
        raise ValueError(msg)
    return version, program


def encode_segwit_address(hrp: str, version: int, program: bytes) -> str:
    """Encode a witness version and program as a lower-case segwit address."""
    encoding = Encoding.BECH32 if version == 0 else Encoding.BECH32M
    return bech32_encode(hrp, [version, *convert_bits(program, 8, 5)], encoding)
