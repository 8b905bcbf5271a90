"""Capability interfaces shared by descriptor leaves.

``FromTree`` builds a leaf from a parsed expression tree (and, through it,
from checksummed text). ``TranslatePk`` rewrites every key of a descriptor
through caller-supplied functions so tree walkers can treat all leaves
alike. ``DescriptorLeaf`` bundles both with the script derivation methods.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Generic, Protocol, Self, TypeVar

from btc_descriptors.descriptor.checksum import add_checksum, verify_checksum
from btc_descriptors.descriptor.expression import Tree


class MiniscriptKey(Hashable, Protocol):
    """A key that can appear in a descriptor."""

    def to_pubkeyhash(self) -> Hashable:
        """The hash of this key committed to by hash-based outputs."""
        ...


P = TypeVar("P", bound=MiniscriptKey)
Q = TypeVar("Q", bound=MiniscriptKey)


class FromTree(ABC):
    """Constructible from an expression tree."""

    @classmethod
    @abstractmethod
    def from_tree(cls, tree: Tree) -> Self:
        """Validate the tree shape and build the value it describes."""

    @classmethod
    def from_str(cls, text: str, *, require_checksum: bool = False) -> Self:
        """Verify and strip the checksum, tokenize, then call :meth:`from_tree`."""
        desc_str = verify_checksum(text, require=require_checksum)
        return cls.from_tree(Tree.from_str(desc_str))


class TranslatePk(ABC, Generic[P, Q]):
    """Rewrites keys of type ``P`` into keys of type ``Q``."""

    @abstractmethod
    def translate_pk(
        self,
        fpk: Callable[[P], Q],
        fpkh: Callable[[Hashable], Hashable],
    ) -> TranslatePk[Q, Q]:
        """Return a copy with every key passed through *fpk* and every key
        hash through *fpkh*. Exceptions raised by either function propagate.
        """


class DescriptorLeaf(FromTree, TranslatePk[P, Q]):
    """Interface every descriptor leaf offers to the descriptor tree."""

    @abstractmethod
    def sanity_check(self) -> None:
        """Raise a :class:`DescriptorError` if the descriptor is unsafe."""

    @abstractmethod
    def to_string_no_checksum(self) -> str: ...

    @abstractmethod
    def script_pubkey(self) -> bytes: ...

    @abstractmethod
    def explicit_script(self) -> bytes: ...

    @abstractmethod
    def script_code(self) -> bytes: ...

    def __str__(self) -> str:
        return add_checksum(self.to_string_no_checksum())
