"""Classlist model layer -- public type re-exports."""

from classlist.model.node import ClassNode, HookedNode, NodeHooks
from classlist.model.source import (
    ClassDict,
    ClassMap,
    ClassSource,
    LiteralSource,
    Resolver,
    as_source,
)

__all__ = [
    # source
    "ClassDict",
    "ClassSource",
    "LiteralSource",
    "ClassMap",
    "Resolver",
    "as_source",
    # node
    "HookedNode",
    "NodeHooks",
    "ClassNode",
]
