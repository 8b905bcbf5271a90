"""DescriptorError — base exception class and the errors raised while
parsing, serializing and deriving scripts from descriptors."""

from __future__ import annotations


class DescriptorError(Exception):
    """Base error for all descriptor operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "descriptor-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ChecksumError(DescriptorError):
    """Descriptor checksum is missing, malformed or does not match."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="checksum-mismatch")


class ExpressionError(DescriptorError):
    """Text could not be tokenized into an expression tree."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="expression-invalid")


class MalformedExpressionError(DescriptorError):
    """Expression tree has the wrong name or number of arguments.

    Attributes:
        name: The function name that was found.
        arg_count: The number of arguments that were found.
    """

    def __init__(self, name: str, arg_count: int, *, context: str) -> None:
        super().__init__(
            f"{name}({arg_count} args) while parsing {context}",
            code="unexpected-expression",
        )
        self.name = name
        self.arg_count = arg_count


class AddressError(DescriptorError):
    """String is not a valid address (or not one for the expected network)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="invalid-address")


class NoExplicitScriptError(DescriptorError):
    """The address type does not reveal its spending script."""

    def __init__(self, message: str = "address has no explicit script") -> None:
        super().__init__(message, code="addr-no-explicit-script")


class NoScriptCodeError(DescriptorError):
    """The address type has no legacy/segwit-v0 script code (taproot)."""

    def __init__(self, message: str = "address has no script code") -> None:
        super().__init__(message, code="addr-no-script-code")
