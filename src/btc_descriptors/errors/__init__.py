"""Errors — exception hierarchy shared by every descriptor module."""

from __future__ import annotations

from btc_descriptors.errors.descriptor_errors import (
    AddressError,
    ChecksumError,
    DescriptorError,
    ExpressionError,
    MalformedExpressionError,
    NoExplicitScriptError,
    NoScriptCodeError,
)

__all__ = [
    "AddressError",
    "ChecksumError",
    "DescriptorError",
    "ExpressionError",
    "MalformedExpressionError",
    "NoExplicitScriptError",
    "NoScriptCodeError",
]
