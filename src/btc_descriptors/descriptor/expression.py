"""Expression trees — the ``name(arg,arg,...)`` syntax of descriptors.

The tokenizer knows nothing about descriptor semantics: each leaf type
validates the shape of the tree it is handed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from btc_descriptors.errors.descriptor_errors import ExpressionError

MAX_RECURSION_DEPTH = 402


@dataclass(frozen=True)
class Tree:
    """A function name and its (possibly empty) ordered argument trees."""

    name: str
    args: tuple[Tree, ...] = ()

    @classmethod
    def from_str(cls, text: str) -> Self:
        """Parse a full expression; the whole input must be consumed.

        Raises:
            ExpressionError: On empty input, unbalanced parentheses,
                trailing characters or excessive nesting.
        """
        if not text:
            msg = "Empty expression"
            raise ExpressionError(msg)
        tree, rest = cls._from_slice(text, 0)
        if rest:
            if rest[0] == ")":
                msg = "Unbalanced parentheses: unexpected ')'"
            else:
                msg = f"Trailing characters after expression: {rest!r}"
            raise ExpressionError(msg)
        return tree

    @classmethod
    def _from_slice(cls, text: str, depth: int) -> tuple[Self, str]:
        if depth >= MAX_RECURSION_DEPTH:
            msg = f"Expression nested deeper than {MAX_RECURSION_DEPTH} levels"
            raise ExpressionError(msg)

        end = len(text)
        for i, ch in enumerate(text):
            if ch in "(),":
                end = i
                break
        name, rest = text[:end], text[end:]
        if not rest.startswith("("):
            return cls(name), rest

        args: list[Tree] = []
        rest = rest[1:]
        while True:
            arg, rest = cls._from_slice(rest, depth + 1)
            args.append(arg)
            if rest.startswith(","):
                rest = rest[1:]
            elif rest.startswith(")"):
                return cls(name, tuple(args)), rest[1:]
            else:
                msg = f"Unbalanced parentheses in expression {name!r}"
                raise ExpressionError(msg)

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}({','.join(str(arg) for arg in self.args)})"
