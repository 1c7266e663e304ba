"""Nodes that own a class interception pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from classlist.hooks.dispatcher import ClassHook


class HookedNode(Protocol):
    """Anything exposing ``hook.classes`` with a ``dispatch`` operation."""

    hook: Any


@dataclass
class NodeHooks:
    """The hook dispatchers a node carries."""

    classes: ClassHook = field(default_factory=ClassHook)


@dataclass
class ClassNode:
    """A minimal stateful node: a name, its props, and its hooks."""

    name: str
    props: dict[str, Any] = field(default_factory=dict)
    hook: NodeHooks = field(default_factory=NodeHooks)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Node name must be a non-empty string")
