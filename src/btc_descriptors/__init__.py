"""btc-descriptors — the standalone address descriptor ``addr(ADDR)``.

Parses and serializes checksummed ``addr()`` descriptors and derives the
output script, explicit script and script code of the wrapped address.
"""

from __future__ import annotations

from btc_descriptors.bitcoin.address import Address, AddressType, Network, WitnessVersion
from btc_descriptors.descriptor.addr import AddressDescriptor

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AddressDescriptor",
    "AddressType",
    "Network",
    "WitnessVersion",
    "__version__",
]
