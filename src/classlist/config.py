from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassListConfig:
    reset_key: str = "$reset"
    max_resolve_depth: int = 32  # resolver hops before create_classes gives up


DEFAULT_CONFIG = ClassListConfig()
