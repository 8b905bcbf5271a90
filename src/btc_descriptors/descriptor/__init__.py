"""Descriptors — checksums, expression trees and the ``addr()`` leaf."""

from __future__ import annotations

from btc_descriptors.descriptor.addr import AddressDescriptor
from btc_descriptors.descriptor.base import DescriptorLeaf, FromTree, MiniscriptKey, TranslatePk
from btc_descriptors.descriptor.checksum import add_checksum, desc_checksum, verify_checksum
from btc_descriptors.descriptor.expression import Tree

__all__ = [
    "AddressDescriptor",
    "DescriptorLeaf",
    "FromTree",
    "MiniscriptKey",
    "Tree",
    "TranslatePk",
    "add_checksum",
    "desc_checksum",
    "verify_checksum",
]
