"""Class normalization and merging.

``create_classes`` turns one declaration into a canonical class map;
``generate_class_list`` folds several maps together, lets the node's class
interceptors rewrite the result, and renders the final class string.
"""

from __future__ import annotations

from typing import Any, Optional

from classlist.config import DEFAULT_CONFIG, ClassListConfig
from classlist.errors import ResolverDepthError
from classlist.hooks.dispatcher import ClassPayload
from classlist.model.node import HookedNode
from classlist.model.source import ClassDict, as_source


def create_classes(
    property_key: str,
    node: Any,
    declaration: Any = None,
    *,
    config: ClassListConfig = DEFAULT_CONFIG,
) -> ClassDict:
    """Produce a canonical class map from a string, map, or resolver.

    Resolvers are called with ``(node, property_key)`` until they yield a
    string or a map.  A map is returned as-is, not copied.

    Raises :class:`ResolverDepthError` if more than
    ``config.max_resolve_depth`` resolvers are chained.
    """
    source = as_source(declaration)
    depth = 0
    while source.pending:
        depth += 1
        if depth > config.max_resolve_depth:
            raise ResolverDepthError(property_key, config.max_resolve_depth)
        source = source.resolve(node, property_key)
    return source.resolve(node, property_key).classes


def generate_class_list(
    node: HookedNode,
    property: str,
    *class_lists: ClassDict,
    config: ClassListConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    """Combine class maps into a single class string.

    Maps are merged left to right, later values winning.  A map whose reset
    key is truthy discards everything merged before it.  The combined map is
    dispatched through ``node.hook.classes``; only names that were enabled
    before dispatch and are still enabled afterwards are emitted, in the
    order the pipeline returned them.  Returns ``None`` when no class
    survives.
    """
    combined: ClassDict = {}
    for class_list in class_lists:
        remaining = dict(class_list)
        if remaining.pop(config.reset_key, False):
            combined = remaining
        else:
            combined.update(remaining)

    result = node.hook.classes.dispatch(
        ClassPayload(property=property, classes=dict(combined))
    )
    names = [
        name
        for name, enabled in result.classes.items()
        if enabled and combined.get(name)
    ]
    return " ".join(names) or None
