"""Built-in class interceptors."""
from __future__ import annotations

import logging
from typing import Optional

from classlist.hooks.base import (
    ClassInterceptor,
    FunctionInterceptor,
    InterceptorFunc,
    as_interceptor,
)


def logging_interceptor(logger: logging.Logger | None = None) -> ClassInterceptor:
    """Create an interceptor that logs each dispatched class map."""
    log = logger or logging.getLogger("classlist")

    def interceptor(property: str, classes: dict[str, bool]) -> dict[str, bool]:
        active = [name for name, enabled in classes.items() if enabled]
        log.info("Classes for %s: %s", property, " ".join(active) or "(none)")
        return classes

    return FunctionInterceptor(interceptor)


def exclude_interceptor(*names: str) -> ClassInterceptor:
    """Create an interceptor that switches the given class names off."""
    excluded = set(names)

    def interceptor(property: str, classes: dict[str, bool]) -> dict[str, bool]:
        return {
            name: False if name in excluded else enabled
            for name, enabled in classes.items()
        }

    return FunctionInterceptor(interceptor)


def section_interceptor(
    section: str, interceptor: ClassInterceptor | InterceptorFunc
) -> ClassInterceptor:
    """Restrict *interceptor* to a single composition key.

    Accepts the same plain functions as :meth:`ClassHook.use`.
    """
    step = as_interceptor(interceptor)

    def scoped(property: str, classes: dict[str, bool]) -> Optional[dict[str, bool]]:
        if property != section:
            return None
        return step.apply(property, classes)

    return FunctionInterceptor(scoped)
