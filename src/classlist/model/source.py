"""Class sources: the three shapes a class declaration can take.

A declaration is wrapped once by :func:`as_source` and then resolved step by
step until a :class:`ClassMap` is reached:

    * ``LiteralSource`` -- a space separated string of class names.
    * ``ClassMap`` -- a mapping of class name to inclusion flag.
    * ``Resolver`` -- a callable ``(node, property_key)`` returning another
      declaration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

ClassDict = dict[str, bool]


@dataclass(frozen=True)
class LiteralSource:
    """A space separated list of class names."""

    value: str
    pending = False

    def resolve(self, node: Any, property_key: str) -> ClassMap:
        # str.split() without a separator never yields empty segments.
        return ClassMap({name: True for name in self.value.split()})


@dataclass(frozen=True)
class ClassMap:
    """An already-canonical class map.

    The wrapped dict is the caller's own object; it is not copied.
    """

    classes: ClassDict
    pending = False

    def resolve(self, node: Any, property_key: str) -> ClassMap:
        return self


@dataclass(frozen=True)
class Resolver:
    """A callable producing a declaration lazily for a node and section."""

    func: Callable[[Any, str], Any]
    pending = True

    def resolve(self, node: Any, property_key: str) -> ClassSource:
        return as_source(self.func(node, property_key))


ClassSource = Union[LiteralSource, ClassMap, Resolver]


def as_source(declaration: Any) -> ClassSource:
    """Wrap a raw declaration in the matching class source.

    Falsy declarations become an empty map.  Values that are neither strings
    nor callables are treated as already canonical and passed through.
    """
    if isinstance(declaration, (LiteralSource, ClassMap, Resolver)):
        return declaration
    if not declaration:
        return ClassMap({})
    if isinstance(declaration, str):
        return LiteralSource(declaration)
    if callable(declaration):
        return Resolver(declaration)
    return ClassMap(declaration)
