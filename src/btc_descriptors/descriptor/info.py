"""Pydantic summary of a descriptor: everything a consumer needs to
build or recognise the output, with hex-encoded scripts."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field

from btc_descriptors.descriptor.addr import AddressDescriptor
from btc_descriptors.errors.descriptor_errors import NoExplicitScriptError, NoScriptCodeError


class DescriptorInfo(BaseModel):
    """Derived facts about an ``addr()`` descriptor.

    ``explicit_script`` and ``script_code`` are ``None`` when the output
    type does not have one.
    """

    descriptor: str
    address: str
    network: str
    address_type: str | None = None
    script_pubkey: str
    explicit_script: str | None = None
    script_code: str | None = None
    segwit_version: int | None = Field(default=None, ge=0, le=16)

    @classmethod
    def from_descriptor(cls, desc: AddressDescriptor) -> Self:
        address = desc.address()
        try:
            explicit_script: str | None = desc.explicit_script().hex()
        except NoExplicitScriptError:
            explicit_script = None
        try:
            script_code: str | None = desc.script_code().hex()
        except NoScriptCodeError:
            script_code = None
        address_type = address.address_type()
        version = desc.segwit_version()
        return cls(
            descriptor=str(desc),
            address=str(address),
            network=address.network.value,
            address_type=address_type.value if address_type is not None else None,
            script_pubkey=desc.script_pubkey().hex(),
            explicit_script=explicit_script,
            script_code=script_code,
            segwit_version=int(version) if version is not None else None,
        )
