"""Output script building — P2PKH, P2SH and witness programs.

Scripts are plain ``bytes``. Only the locking scripts an address can stand
for are built here; nothing in this package executes scripts.
"""

from __future__ import annotations

import enum
import struct

# ---------------------------------------------------------------------------
# Opcodes
# ---------------------------------------------------------------------------


class OpCode(int, enum.Enum):
    """Opcodes used by standard output scripts."""

    OP_0 = 0x00
    OP_PUSHDATA1 = 0x4C
    OP_PUSHDATA2 = 0x4D
    OP_PUSHDATA4 = 0x4E
    OP_1 = 0x51
    OP_16 = 0x60
    OP_DUP = 0x76
    OP_EQUAL = 0x87
    OP_EQUALVERIFY = 0x88
    OP_HASH160 = 0xA9
    OP_CHECKSIG = 0xAC


# ---------------------------------------------------------------------------
# Data push helpers
# ---------------------------------------------------------------------------


def push_data(data: bytes) -> bytes:
    """Encode a data push operation using minimal encoding rules.

    Args:
        data: Arbitrary data bytes.

    Returns:
        The opcode(s) + data for a minimal push of *data*.
    """
    length = len(data)
    if length == 0:
        return bytes([OpCode.OP_0])
    if length <= 0x4B:
        return bytes([length]) + data
    if length <= 0xFF:
        return bytes([OpCode.OP_PUSHDATA1, length]) + data
    if length <= 0xFFFF:
        return bytes([OpCode.OP_PUSHDATA2]) + struct.pack("<H", length) + data
    return bytes([OpCode.OP_PUSHDATA4]) + struct.pack("<I", length) + data


def small_int_opcode(n: int) -> int:
    """Opcode pushing the small integer *n* (0..16)."""
    if n == 0:
        return OpCode.OP_0
    if 1 <= n <= 16:
        return OpCode.OP_1 + n - 1
    msg = f"small integer out of range: {n}"
    raise ValueError(msg)


# ---------------------------------------------------------------------------
# Locking scripts
# ---------------------------------------------------------------------------


def _require_hash160(value: bytes, name: str) -> None:
    if len(value) != 20:
        msg = f"{name} must be 20 bytes, got {len(value)}"
        raise ValueError(msg)


def p2pkh_lock_script(pubkey_hash: bytes) -> bytes:
    """Build a P2PKH locking script.

    OP_DUP OP_HASH160 <20 bytes> OP_EQUALVERIFY OP_CHECKSIG
    """
    _require_hash160(pubkey_hash, "pubkey_hash")
    return (
        bytes([OpCode.OP_DUP, OpCode.OP_HASH160])
        + push_data(pubkey_hash)
        + bytes([OpCode.OP_EQUALVERIFY, OpCode.OP_CHECKSIG])
    )


def p2sh_lock_script(script_hash: bytes) -> bytes:
    """Build a P2SH locking script.

    OP_HASH160 <20 bytes> OP_EQUAL
    """
    _require_hash160(script_hash, "script_hash")
    return bytes([OpCode.OP_HASH160]) + push_data(script_hash) + bytes([OpCode.OP_EQUAL])


def witness_program_script(version: int, program: bytes) -> bytes:
    """Build a segwit locking script.

    ``OP_n <program>`` where n is the witness version (OP_0 for v0).
    """
    return bytes([small_int_opcode(version)]) + push_data(program)
