"""Helpers that run the whole declaration-to-string flow for a section."""

from __future__ import annotations

from typing import Any, Optional

from classlist.classes import create_classes, generate_class_list
from classlist.config import DEFAULT_CONFIG, ClassListConfig
from classlist.model.node import ClassNode, HookedNode


def compose_classes(
    node: HookedNode,
    section: str,
    *declarations: Any,
    config: ClassListConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    """Normalize each declaration for *section* and merge them in order."""
    class_lists = [
        create_classes(section, node, declaration, config=config)
        for declaration in declarations
    ]
    return generate_class_list(node, section, *class_lists, config=config)


def section_classes(
    node: ClassNode,
    section: str,
    *,
    config: ClassListConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    """Compute the class string for one section of a node from its props.

    Sources, lowest priority first:
        - ``root_classes``: applied to every section, usually a resolver.
        - ``classes[section]``: per-section declarations.
        - ``{section}_class``: a single-section shorthand prop.
    """
    props = node.props
    per_section = props.get("classes") or {}
    return compose_classes(
        node,
        section,
        props.get("root_classes"),
        per_section.get(section),
        props.get(f"{section}_class"),
        config=config,
    )
