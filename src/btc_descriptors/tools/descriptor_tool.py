#!/usr/bin/env python3
"""Descriptor Tool — inspect and build ``addr()`` descriptors.

A standalone CLI utility around the address descriptor:

    # Show scripts and output type of a descriptor (checksum optional)
    python -m btc_descriptors.tools.descriptor_tool inspect "addr(bc1q...)#checksum"

    # Build the checksummed descriptor for an address
    python -m btc_descriptors.tools.descriptor_tool from-address <address>

    # Append the checksum to a descriptor
    python -m btc_descriptors.tools.descriptor_tool checksum "addr(bc1q...)"

Settings come from ``BTCDESC_*`` environment variables, e.g.
``BTCDESC_NETWORK=testnet`` to reject addresses of other networks and
``BTCDESC_REQUIRE_CHECKSUM=true`` to reject descriptors without a checksum.
"""

from __future__ import annotations

import logging
import sys

from pydantic import ValidationError

from btc_descriptors.bitcoin.address import Address
from btc_descriptors.config.settings import DescriptorSettings
from btc_descriptors.descriptor.addr import AddressDescriptor
from btc_descriptors.descriptor.checksum import add_checksum, verify_checksum
from btc_descriptors.descriptor.info import DescriptorInfo
from btc_descriptors.errors.descriptor_errors import AddressError, DescriptorError

logger = logging.getLogger(__name__)


def _cmd_inspect(settings: DescriptorSettings, text: str) -> None:
    """Parse a descriptor and print its derived scripts as JSON."""
    desc = AddressDescriptor.from_str(text, require_checksum=settings.require_checksum)
    if settings.network is not None and not desc.address().is_valid_for_network(settings.network):
        msg = f"address {desc.address()} is not valid on {settings.network}"
        raise AddressError(msg)
    print(DescriptorInfo.from_descriptor(desc).model_dump_json(indent=2))


def _cmd_from_address(settings: DescriptorSettings, text: str) -> None:
    """Print the checksummed ``addr()`` descriptor for an address."""
    address = Address.from_string(text, network=settings.network)
    print(AddressDescriptor(address))


def _cmd_checksum(text: str) -> None:
    """Print *text* with its descriptor checksum, verifying any existing one."""
    print(add_checksum(verify_checksum(text)))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(__doc__)
        return 1

    try:
        settings = DescriptorSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        print(f"error: invalid-settings: {problems}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level.value, format="%(levelname)s %(name)s %(message)s")

    cmd, value = args[0].lower(), args[1]
    try:
        if cmd == "inspect":
            _cmd_inspect(settings, value)
        elif cmd == "from-address":
            _cmd_from_address(settings, value)
        elif cmd == "checksum":
            _cmd_checksum(value)
        else:
            print(f"Unknown command: {cmd}")
            print(__doc__)
            return 1
    except DescriptorError as exc:
        logger.debug("Command %s failed", cmd, exc_info=True)
        print(f"error: {exc.code}: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
