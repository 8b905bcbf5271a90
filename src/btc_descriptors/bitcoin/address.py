"""Address values — network tag plus a classified output payload.

Address operations:
- Parsing Base58Check (P2PKH / P2SH) and Bech32/Bech32m (segwit) strings
- Canonical string encoding per network
- Output type classification and script pubkey derivation
"""

from __future__ import annotations

import enum
import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from btc_descriptors.bitcoin.bech32 import decode_segwit_address, encode_segwit_address
from btc_descriptors.bitcoin.keys import base58check_decode, base58check_encode
from btc_descriptors.bitcoin.script import (
    p2pkh_lock_script,
    p2sh_lock_script,
    witness_program_script,
)
from btc_descriptors.errors.descriptor_errors import AddressError

if TYPE_CHECKING:
    from btc_descriptors.bitcoin.keys import PublicKey

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Network(enum.StrEnum):
    """Bitcoin networks an address can belong to."""

    BITCOIN = "bitcoin"
    TESTNET = "testnet"
    SIGNET = "signet"
    REGTEST = "regtest"


class WitnessVersion(enum.IntEnum):
    """Segwit output version (v0 = hash-based, v1 = taproot)."""

    V0 = 0
    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5
    V6 = 6
    V7 = 7
    V8 = 8
    V9 = 9
    V10 = 10
    V11 = 11
    V12 = 12
    V13 = 13
    V14 = 14
    V15 = 15
    V16 = 16


class AddressType(enum.StrEnum):
    """Standard output types an address can be classified as."""

    P2PKH = "p2pkh"
    P2SH = "p2sh"
    P2WPKH = "p2wpkh"
    P2WSH = "p2wsh"
    P2TR = "p2tr"


# Base58 version bytes; testnet, signet and regtest share the test prefixes
_P2PKH_PREFIX = {
    Network.BITCOIN: 0x00,
    Network.TESTNET: 0x6F,
    Network.SIGNET: 0x6F,
    Network.REGTEST: 0x6F,
}
_P2SH_PREFIX = {
    Network.BITCOIN: 0x05,
    Network.TESTNET: 0xC4,
    Network.SIGNET: 0xC4,
    Network.REGTEST: 0xC4,
}
_HRP = {
    Network.BITCOIN: "bc",
    Network.TESTNET: "tb",
    Network.SIGNET: "tb",
    Network.REGTEST: "bcrt",
}

# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PubkeyHash:
    """Legacy pay-to-public-key-hash payload."""

    hash: bytes

    def script_pubkey(self) -> bytes:
        return p2pkh_lock_script(self.hash)

    def sort_key(self) -> tuple[int, int, bytes]:
        return (0, 0, self.hash)


@dataclass(frozen=True)
class ScriptHash:
    """Legacy pay-to-script-hash payload."""

    hash: bytes

    def script_pubkey(self) -> bytes:
        return p2sh_lock_script(self.hash)

    def sort_key(self) -> tuple[int, int, bytes]:
        return (1, 0, self.hash)


@dataclass(frozen=True)
class WitnessProgram:
    """Segwit payload: a witness version and a 2..40 byte program."""

    version: WitnessVersion
    program: bytes

    def script_pubkey(self) -> bytes:
        return witness_program_script(self.version, self.program)

    def sort_key(self) -> tuple[int, int, bytes]:
        return (2, int(self.version), self.program)


Payload = PubkeyHash | ScriptHash | WitnessProgram

# ---------------------------------------------------------------------------
# Address
# ---------------------------------------------------------------------------


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Address:
    """A validated, network-aware Bitcoin address.

    Instances are only produced by :meth:`from_string` or by the typed
    constructors below, so holders can assume the value is well formed.

    Equality, hashing and ordering use the payload and the encoding the
    network selects (Base58 prefix or segwit HRP), not the network tag.
    Networks that share an encoding produce the same string, so a signet
    or regtest value equals its parsed (testnet-tagged) copy.
    """

    payload: Payload
    network: Network

    # -- construction --------------------------------------------------------

    @classmethod
    def from_string(cls, text: str, network: Network | None = None) -> Self:
        """Parse and validate an address string.

        Args:
            text: Base58Check, Bech32 or Bech32m address.
            network: When given, the address must be valid on this network.

        Raises:
            AddressError: If *text* is not a valid address, or not one for
                *network*.
        """
        try:
            address = cls._decode(text)
        except ValueError as exc:
            msg = f"invalid address {text!r}: {exc}"
            raise AddressError(msg) from exc
        if network is not None and not address.is_valid_for_network(network):
            msg = f"address {text!r} is not valid on {network}"
            raise AddressError(msg)
        logger.debug("Parsed %s address on %s", address.address_type(), address.network)
        return address

    @classmethod
    def _decode(cls, text: str) -> Self:
        lowered = text.lower()
        for network in (Network.BITCOIN, Network.TESTNET, Network.REGTEST):
            hrp = _HRP[network]
            if lowered.startswith(hrp + "1"):
                version, program = decode_segwit_address(hrp, text)
                return cls(WitnessProgram(WitnessVersion(version), program), network)

        payload = base58check_decode(text)
        if len(payload) != 21:
            msg = f"invalid Base58 payload length: {len(payload)}"
            raise ValueError(msg)
        prefix, body = payload[0], payload[1:]
        if prefix == _P2PKH_PREFIX[Network.BITCOIN]:
            return cls(PubkeyHash(body), Network.BITCOIN)
        if prefix == _P2SH_PREFIX[Network.BITCOIN]:
            return cls(ScriptHash(body), Network.BITCOIN)
        if prefix == _P2PKH_PREFIX[Network.TESTNET]:
            return cls(PubkeyHash(body), Network.TESTNET)
        if prefix == _P2SH_PREFIX[Network.TESTNET]:
            return cls(ScriptHash(body), Network.TESTNET)
        msg = f"unknown address version byte: {prefix:#04x}"
        raise ValueError(msg)

    @classmethod
    def p2pkh(cls, pubkey: PublicKey, network: Network) -> Self:
        """Pay-to-public-key-hash address for *pubkey*."""
        return cls(PubkeyHash(pubkey.to_pubkeyhash()), network)

    @classmethod
    def p2wpkh(cls, pubkey: PublicKey, network: Network) -> Self:
        """Segwit v0 pay-to-witness-public-key-hash address for *pubkey*.

        Raises:
            AddressError: If *pubkey* is uncompressed.
        """
        if not pubkey.compressed:
            msg = "segwit addresses require a compressed public key"
            raise AddressError(msg)
        return cls(WitnessProgram(WitnessVersion.V0, pubkey.to_pubkeyhash()), network)

    # -- classification ------------------------------------------------------

    def address_type(self) -> AddressType | None:
        """Standard output type, or ``None`` for unknown witness programs."""
        match self.payload:
            case PubkeyHash():
                return AddressType.P2PKH
            case ScriptHash():
                return AddressType.P2SH
            case WitnessProgram(version=WitnessVersion.V0, program=program) if len(program) == 20:
                return AddressType.P2WPKH
            case WitnessProgram(version=WitnessVersion.V0, program=program) if len(program) == 32:
                return AddressType.P2WSH
            case WitnessProgram(version=WitnessVersion.V1, program=program) if len(program) == 32:
                return AddressType.P2TR
            case _:
                return None

    def is_valid_for_network(self, network: Network) -> bool:
        """Whether this address string would be accepted on *network*.

        Test networks share Base58 prefixes, and testnet and signet share
        the ``tb`` segwit prefix, so an address decoded as testnet is also
        valid on those networks.
        """
        if isinstance(self.payload, WitnessProgram):
            return _HRP[self.network] == _HRP[network]
        return _P2PKH_PREFIX[self.network] == _P2PKH_PREFIX[network]

    def script_pubkey(self) -> bytes:
        """The output script that pays to this address."""
        return self.payload.script_pubkey()

    # -- formatting / ordering -----------------------------------------------

    def __str__(self) -> str:
        match self.payload:
            case PubkeyHash(hash=h):
                return base58check_encode(bytes([_P2PKH_PREFIX[self.network]]) + h)
            case ScriptHash(hash=h):
                return base58check_encode(bytes([_P2SH_PREFIX[self.network]]) + h)
            case WitnessProgram(version=version, program=program):
                return encode_segwit_address(_HRP[self.network], version, program)

    def __repr__(self) -> str:
        return f"Address({str(self)!r}, network={self.network.value!r})"

    def _encoding_key(self) -> tuple[int, str]:
        # Base58 prefixes for P2PKH and P2SH split the networks identically
        if isinstance(self.payload, WitnessProgram):
            return (0, _HRP[self.network])
        return (_P2PKH_PREFIX[self.network], "")

    def _compare_key(self) -> tuple[tuple[int, int, bytes], tuple[int, str]]:
        return (self.payload.sort_key(), self._encoding_key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._compare_key() == other._compare_key()

    def __hash__(self) -> int:
        return hash(self._compare_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._compare_key() < other._compare_key()
