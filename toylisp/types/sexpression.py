"""Symbolic expressions: the parsed, immutable tree form of source text.

Four variants, all frozen dataclasses so they hash and compare by value:

    - SList          ordered tuple of expressions; the empty list is nil
    - Symbol         identifier, looked up by name when evaluated
    - Integer        signed integer literal
    - StringLiteral  raw text between the quotes (no escape processing)

`str()` of any expression renders it back as source text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash for environment keys
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Integer:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True, slots=True)
class SList:
    items: tuple[SExpression, ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


SExpression = Union[SList, Symbol, Integer, StringLiteral]

NIL_EXPR = SList(())


def is_nil_expr(expr: SExpression) -> bool:
    return isinstance(expr, SList) and not expr.items
