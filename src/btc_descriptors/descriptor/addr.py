"""Standalone address descriptor — ``addr(ADDR)``.

``ADDR`` is any valid Base58, Bech32 or Bech32m Bitcoin address. The leaf
carries no keys: it only knows the output script of the address and, for
the output types that reveal it, the script that spends it.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Self

from btc_descriptors.bitcoin.address import Address, AddressType, WitnessProgram
from btc_descriptors.descriptor.base import DescriptorLeaf, P, Q, TranslatePk
from btc_descriptors.errors.descriptor_errors import (
    MalformedExpressionError,
    NoExplicitScriptError,
    NoScriptCodeError,
)

if TYPE_CHECKING:
    from btc_descriptors.bitcoin.address import WitnessVersion
    from btc_descriptors.descriptor.expression import Tree

logger = logging.getLogger(__name__)


@functools.total_ordering
class AddressDescriptor(DescriptorLeaf[P, Q]):
    """A descriptor wrapping a single, already validated address.

    Equality, ordering and hashing delegate to the wrapped address.
    """

    def __init__(self, address: Address) -> None:
        # The address is trusted to have been validated when it was built.
        self._address = address

    # -- accessors -----------------------------------------------------------

    def into_inner(self) -> Address:
        """Give up the descriptor and return the wrapped address."""
        return self._address

    def as_inner(self) -> Address:
        """Borrow the wrapped address."""
        return self._address

    def address(self) -> Address:
        """The wrapped address."""
        return self._address

    def sanity_check(self) -> None:
        """Always passes: the address was validated on construction."""

    def segwit_version(self) -> WitnessVersion | None:
        """Witness version of the address, ``None`` for legacy payloads."""
        match self._address.payload:
            case WitnessProgram(version=version):
                return version
            case _:
                return None

    # -- scripts -------------------------------------------------------------

    def script_pubkey(self) -> bytes:
        """The output script the address pays to."""
        return self._address.script_pubkey()

    def explicit_script(self) -> bytes:
        """The spending script, for P2PKH and P2WPKH only.

        Raises:
            NoExplicitScriptError: For every other output type; their real
                spending script cannot be recovered from the address.
        """
        match self._address.address_type():
            case AddressType.P2PKH | AddressType.P2WPKH:
                return self._address.payload.script_pubkey()
            case _:
                raise NoExplicitScriptError

    def script_code(self) -> bytes:
        """Script code for legacy and segwit v0 signature hashing.

        Raises:
            NoScriptCodeError: For taproot outputs.
        """
        match self._address.address_type():
            case AddressType.P2TR:
                raise NoScriptCodeError
            case _:
                return self.script_pubkey()

    # -- text ----------------------------------------------------------------

    def to_string_no_checksum(self) -> str:
        """``addr(ADDR)`` without the ``#checksum`` suffix."""
        return f"addr({self._address})"

    @classmethod
    def from_tree(cls, tree: Tree) -> Self:
        """Build from an ``addr`` node with exactly one address argument."""
        if tree.name == "addr" and len(tree.args) == 1:
            address = Address.from_string(tree.args[0].name)
            logger.debug("Parsed addr descriptor for %s", address)
            return cls(address)
        raise MalformedExpressionError(tree.name, len(tree.args), context="addr descriptor")

    # -- key translation -----------------------------------------------------

    def translate_pk(
        self,
        fpk: Callable[[P], Q],
        fpkh: Callable[[Hashable], Hashable],
    ) -> TranslatePk[Q, Q]:
        """No keys to translate: returns an equal descriptor of the same type."""
        return type(self)(self._address)

    # -- dunder --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressDescriptor):
            return NotImplemented
        return self._address == other._address

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AddressDescriptor):
            return NotImplemented
        return self._address < other._address

    def __hash__(self) -> int:
        return hash(self._address)

    def __repr__(self) -> str:
        return repr(self._address)
