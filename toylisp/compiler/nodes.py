from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from toylisp.types.values import Datum, NIL


@dataclass(frozen=True)
class LiteralNode:
    value: Datum


@dataclass(frozen=True)
class LookupNode:
    name: str


@dataclass(frozen=True)
class IfNode:
    cond: Node
    then: Node
    orelse: Node = LiteralNode(NIL)


@dataclass(frozen=True)
class SetNode:
    name: str
    value: Node


@dataclass(frozen=True)
class LambdaNode:
    params: tuple[str, ...]
    body: tuple[Node, ...]


@dataclass(frozen=True)
class ApplicationNode:
    func: Node
    args: tuple[Node, ...] = ()


Node = Union[LiteralNode, LookupNode, IfNode, SetNode, LambdaNode, ApplicationNode]
