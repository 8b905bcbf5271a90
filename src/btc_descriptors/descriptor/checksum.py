"""Descriptor checksums (BIP380).

Every descriptor string may carry an 8-character ``#checksum`` suffix
computed by a BCH code over the descriptor text.
"""

from __future__ import annotations

import logging

from btc_descriptors.errors.descriptor_errors import ChecksumError

logger = logging.getLogger(__name__)

INPUT_CHARSET = "0123456789()[],'/*abcdefgh@:$%{}IJKLMNOPQRSTUVWXYZ&+-.;<=>?!^_|~ijklmnopqrstuvwxyzABCDEFGH`#\"\\ "
CHECKSUM_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

_INPUT_CHARSET_INV = {c: i for i, c in enumerate(INPUT_CHARSET)}
_GENERATOR = (0xF5DEE51989, 0xA9FDCA3312, 0x1BAB10E32D, 0x3706B1677A, 0x644D626FFD)


def _poly_mod(c: int, val: int) -> int:
    c0 = c >> 35
    c = ((c & 0x7FFFFFFFF) << 5) ^ val
    for i, gen in enumerate(_GENERATOR):
        if (c0 >> i) & 1:
            c ^= gen
    return c


def desc_checksum(desc: str) -> str:
    """Compute the checksum for a descriptor string (without ``#``).

    Raises:
        ChecksumError: If *desc* contains a character outside the
            descriptor input charset.
    """
    c = 1
    cls = 0
    clscount = 0
    for ch in desc:
        pos = _INPUT_CHARSET_INV.get(ch)
        if pos is None:
            msg = f"Invalid character in checksum: '{ch}'"
            raise ChecksumError(msg)
        c = _poly_mod(c, pos & 31)
        cls = cls * 3 + (pos >> 5)
        clscount += 1
        if clscount == 3:
            c = _poly_mod(c, cls)
            cls = 0
            clscount = 0
    if clscount > 0:
        c = _poly_mod(c, cls)
    for _ in range(8):
        c = _poly_mod(c, 0)
    c ^= 1
    return "".join(CHECKSUM_CHARSET[(c >> (5 * (7 - j))) & 31] for j in range(8))


def add_checksum(desc: str) -> str:
    """Append ``#<checksum>`` to a descriptor string."""
    return f"{desc}#{desc_checksum(desc)}"


def verify_checksum(s: str, *, require: bool = False) -> str:
    """Check the optional ``#checksum`` suffix of *s* and strip it.

    Args:
        s: Descriptor string, with or without a checksum.
        require: Reject strings that carry no checksum at all.

    Returns:
        The descriptor part of *s*, without the checksum.

    Raises:
        ChecksumError: On unprintable characters, a missing checksum when
            *require* is set, or a checksum that does not match.
    """
    for ch in s:
        if ord(ch) < 32 or ord(ch) > 126:
            msg = f"Unprintable character: {ch!r}"
            raise ChecksumError(msg)
    desc_str, sep, checksum_str = s.partition("#")
    if not sep:
        if require:
            msg = "Missing descriptor checksum"
            raise ChecksumError(msg)
        return desc_str
    expected = desc_checksum(desc_str)
    if checksum_str != expected:
        msg = f"Invalid checksum '{checksum_str}', expected '{expected}'"
        raise ChecksumError(msg)
    logger.debug("Descriptor checksum %s verified", checksum_str)
    return desc_str
